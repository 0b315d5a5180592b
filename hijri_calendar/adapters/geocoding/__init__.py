from hijri_calendar.adapters.geocoding.bigdatacloud_geocoder import BigDataCloudGeocoder

__all__ = ["BigDataCloudGeocoder"]
