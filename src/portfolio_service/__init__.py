"""Portfolio bucket service: positions, buckets and valuation over cached market prices."""

__version__ = "0.1.0"
