"""
Application layer - Use cases and orchestration for the Student ID Registry.

This layer contains:
- Port definitions (ordered store, audit sink, logical clock)
- Application services (registry façade, admin set, token views)

IMPORT RULES:
- CAN import from: domain, config
- Adapters are injected by bootstrap, never imported here
"""
