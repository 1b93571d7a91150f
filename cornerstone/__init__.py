"""Cornerstone OS backend package.

Holds the HTTP API, the persistence layer and the client-side notification
state shared by the dashboard widgets.
"""
