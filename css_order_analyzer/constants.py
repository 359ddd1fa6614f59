"""Constants for css-order-analyzer."""

# Exit codes: errors share the conflict status
EXIT_SUCCESS = 0  # No order-dependent styles found
EXIT_CONFLICTS = 1  # At least one conflict found
EXIT_ERROR = 1  # Run aborted

# Rendered in reports when a stylesheet id has no recorded URL
UNKNOWN_SOURCE = "unknown source"

# Selects every element of the document, in document order
ALL_ELEMENTS_SELECTOR = "*"
