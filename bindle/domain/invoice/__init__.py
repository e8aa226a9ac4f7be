"""Invoice model: bindle metadata, parcels, labels and groups."""
