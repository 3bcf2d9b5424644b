"""
Studio listing API.
The HTTP layer, studio store, and seeding live under `studio_api.api`; shared settings and logging under `studio_api.common`.
"""
