"""
Utility functions module.

Time Semantics:
- Candle times are epoch seconds taken from the kline open time
- Signal times are always the time of the triggering candle
- Wall-clock time is only used for the "last updated" stamp of a scan
"""
