from hostel_allocation.api.routes import admin, students, system

__all__ = ["admin", "students", "system"]
