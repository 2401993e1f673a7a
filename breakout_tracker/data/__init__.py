"""
Candle data models, kline payload parsing and validation.
"""
