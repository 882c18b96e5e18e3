"""Middleware chains for job, node and task handlers, and host environment injection."""