"""Version requirements, package queries and dependency resolution.

- models.py: VersionReq and version parsing
- parser.py: ``name[@requirement]`` tokens
- query.py: Query, the fetch + select step for one package
- resolver.py: Resolver, recursive dependency expansion
"""
