# Services package init
"""
crudsuite — Store Layer
=========================

What:  Data access between routes (HTTP) and MongoDB (persistence).

Service Inventory:
    - ResourceStore: list / create / delete on one root collection
    - ProjectStore:  ResourceStore plus embedded-task add / remove / toggle

Stores are built per request around the app's collection and hold no
state of their own.
"""
