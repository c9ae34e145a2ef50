""" package supplying the elements of the optical scene

    The :mod:`~.elem` subpackage provides the optic, a
    :class:`~.optic.Lens` or :class:`~.optic.Mirror`, its focal length
    models and outline shapes, the optical objects imaged by the optic and
    the projection screen that catches the light.

    The modules in this package are:

        - :mod:`~.optic`
        - :mod:`~.focallength`
        - :mod:`~.opticshapes`
        - :mod:`~.opticalobject`
        - :mod:`~.projectionscreen`
"""
