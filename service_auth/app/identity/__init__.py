"""
Identity directory package.

- models: identity records, seed data and the public identity view.
- verifier: username/secret checks against the identity store.
- login: the login and identity listing operations exposed over HTTP.
"""
