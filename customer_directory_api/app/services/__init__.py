"""
Service layer.

Each service encapsulates the queries for one entity and is built
around an injected ``StoreClient``, so API handlers never touch SQL.
"""
