# Routes package init
"""
WEB 420 API: Routes Package
===========================

Route Inventory:
    - users.py:      POST /api/signup, POST /api/login
    - composers.py:  GET/POST /api/composers, GET/PUT/DELETE /api/composers/{id}
    - persons.py:    GET/POST /api/persons
    - teams.py:      GET/POST /api/teams, DELETE /api/teams/{id},
                     GET/POST /api/teams/{id}/players
    - customers.py:  POST /api/customers,
                     GET/POST /api/customers/{username}/invoices
    - health.py:     GET /health

Routes stay thin: parse the request, call a service, return its result.
Errors propagate to the global exception handlers in main.py.
"""
