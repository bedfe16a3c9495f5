"""HR hierarchy package.

Organized by feature modules (profiles, hierarchy) with a thin Flask
controller layer over service/repository layers. The hierarchy layout
itself is a pure function of a profile snapshot.
"""
