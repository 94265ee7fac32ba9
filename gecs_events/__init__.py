# GECS Event Dump — reads the GECSEVENTS table and prints every row
__version__ = "1.0.0"
