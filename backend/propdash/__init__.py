"""
propdash - multi-service property management dashboard (hotel, restaurant, pool)
"""
__version__ = "1.0.0"
