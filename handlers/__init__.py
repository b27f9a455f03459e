"""
handlers/ - Presentation Layer
================================
FastAPI request handlers. Each handler reads the HTTP request,
delegates to the appropriate repository, and maps the result to a status code and JSON body.
No SQL lives here.
"""
