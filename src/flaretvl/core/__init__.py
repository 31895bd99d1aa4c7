"""Core domain logic: TVL snapshots and the refresh loop."""
