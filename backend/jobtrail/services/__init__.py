"""Services Layer — the async shell around core logic.

Invariants:
    - Every employee write goes through EmployeeService or DepartmentService,
      both of which call AuditRecorder inside the write transaction
    - Services commit; routes never touch the session directly

Design Decisions:
    - One service per aggregate (employee, job, department) plus the audit pair
"""
