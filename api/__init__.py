"""API package - routes, middleware, dependencies and response envelopes"""
