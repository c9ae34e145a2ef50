# -*- coding: utf-8 -*-
""" The **geoptics** geometric optics engine

    Given a thin lens or mirror and one or more optical objects, geoptics
    computes the images formed by the optic, the light rays that justify
    them, the guides drawn at the edges of a lens and the points of interest
    used to navigate measuring tools.

    The scene model is contained in the :mod:`~.optical` subpackage. It is
    supported by the following subpackages:

        - :mod:`~.optical`: OpticalScene, enums, constants and exceptions
        - :mod:`~.elem`: the optic, its focal length models and shapes, and
          the optical objects
        - :mod:`~.parax`: paraxial image formation and lens guides
        - :mod:`~.raytr`: tracing of light rays through the optic

    The :mod:`~.gui` subpackage connects a scene to its consumers and
    provides the jump points of measuring tools.

    The :mod:`~.util` subpackage provides 2d vector math and change
    notification.
"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version('geometric-optics')
except PackageNotFoundError:
    __version__ = 'unknown'


def listobj(obj):
    """ Print wrapper function for listobj_str() method of `obj`.

    Classes may implement the `listobj_str` method that returns a string
    containing a formatted description of the object, for example
    :meth:`.OpticalScene.listobj_str` and :meth:`.Optic.listobj_str`.
    """
    try:
        print(obj.listobj_str())
    except AttributeError:
        print(repr(obj))
