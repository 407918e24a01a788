"""HTTP interface: routers, dependencies and error translation."""
