"""
Domain Layer

Entities, identity value objects and repository contracts. Nothing in this
package talks to the database.
"""
