"""
zbank: a small account service (authenticate, balance, deposit, withdraw)
exposed as a Flask JSON API over a SQLAlchemy-backed relational store.
"""
