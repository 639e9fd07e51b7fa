# Services package init
"""
Users API Backend — Services Layer
====================================

What:  Business logic layer sitting between routes (HTTP) and the store.
How:   Services accept the store plus plain values, apply the rules,
       and return records or raise application exceptions.

Service Inventory:
    - UserService: list / get / create / update / delete over a UserStore
"""
