"""HTTP surface of the PMS API."""
