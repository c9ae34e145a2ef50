""" package supplying utility functions for math and numpy support

    The :mod:`~geoptics.util` subpackage provides miscellaneous functions for
    2d geometric calculations and anything else that doesn't have an obvious
    home. These include:

        - miscellaneous math functions, including segment clipping and
          polygon hit testing, :mod:`~.misc_math`
        - change notification between model entities, :mod:`~.observable`
"""
