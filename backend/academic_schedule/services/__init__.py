"""Business logic: slot computation, validation, authorization and the services built on them."""
