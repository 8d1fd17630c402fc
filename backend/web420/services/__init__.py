# Services package init
"""
WEB 420 API: Services Layer
===========================

What:  Business logic between routes (HTTP) and the database.

Service Inventory:
    - UserStore:        username lookup / insert for the credential flow
    - AuthService:      signup (register) and login (authenticate)
    - ComposerService:  composer CRUD
    - PersonService:    person list / create
    - TeamService:      teams and embedded players
    - CustomerService:  customers and embedded invoices
"""
