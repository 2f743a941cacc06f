"""
Infrastructure layer for the Vhara Bari rental API.

This layer contains the implementation details for external systems integration:
- Database (MongoDB through pymongo's async client)
- Authentication (signed JWT session tokens)
- Payments (Stripe payment intents)

The infrastructure layer implements interfaces defined in the domain layer,
following the Dependency Inversion Principle of Clean Architecture.
"""
