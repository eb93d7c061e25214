"""County property-record owner mapping"""

__version__ = "0.1.0"
