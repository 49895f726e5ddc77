"""Engine subpackage: time, positions, transformations, events and darkness."""
