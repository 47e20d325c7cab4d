"""Feature entities: contacts and the addresses attached to them."""
