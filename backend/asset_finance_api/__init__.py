"""
Asset finance agreements REST API.

Layers, outermost first:
- routers: HTTP surface, one generated router per resource
- services: parent resolution, create/read/update/delete, cascade deletes
- repositories: query composition over SQLAlchemy sessions
- models / schemas: ORM entities and pydantic transfer models
"""
