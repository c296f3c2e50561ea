"""Pure domain logic: status grouping, filter criteria, coordinate extraction, phone profiles."""
