"""GroupTherapy content-management storage service."""
