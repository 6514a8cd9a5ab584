"""AdOnStreet marketing inventory API."""
