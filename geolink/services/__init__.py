"""Services built on top of geolink core."""
