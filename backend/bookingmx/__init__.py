"""
BookingMX - hotel reservation service with a nearby-city lookup
"""
__version__ = "1.0.0"
