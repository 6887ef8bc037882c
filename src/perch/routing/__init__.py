"""Routing — route table building and dispatch resolution.

Route declarations are captured from a route source, normalized, resolved
to controller actions, and stored in order on the router.
"""
