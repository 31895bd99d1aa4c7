"""TVL snapshot models and builder."""
