"""Resource helpers, one module per area of the DNSimple API.

Each helper wraps a `Client` and turns method arguments into a path, an optional
payload and the output type the `data` member is deserialized into. Helpers are
normally reached through the client, e.g. `client.zones.list_zones(1010)`.
"""
