"""
Avatar Registry API

A RESTful API storing the 3D avatar each user selected in the avatar creator.
"""

__version__ = "1.0.0"
