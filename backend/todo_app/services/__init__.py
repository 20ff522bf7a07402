"""Services Layer — task, user and authentication orchestration plus startup bootstrap.

Invariants:
    - Services validate first, then call repositories, then commit
    - One service instance per request, bound to that request's session
"""
