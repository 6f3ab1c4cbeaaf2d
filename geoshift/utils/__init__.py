"""Internal helpers for geoshift"""
