""" Package for tracing light rays from the optical objects

    The :mod:`~.raytr` subpackage traces rays from each optical object
    through the optic, for the selected :class:`~.RaysMode`. It includes:

        - Ray tracing through the thin optic, :mod:`~.raytrace`
        - Exception classes for reporting ray trace errors, :mod:`~.traceerror`
        - Light spots cast on a projection screen, :mod:`~.lightspot`

    A traced ray is a list of :class:`LightRaySegment`.
"""

from collections import namedtuple

LightRaySegment = namedtuple('LightRaySegment',
                             ['start_point', 'end_point', 'is_virtual'])
LightRaySegment.__new__.__defaults__ = (False,)
LightRaySegment.__doc__ = "straight piece of a traced light ray"
LightRaySegment.start_point.__doc__ = "start of the segment, a numpy array"
LightRaySegment.end_point.__doc__ = "end of the segment, a numpy array"
LightRaySegment.is_virtual.__doc__ = ("True for the back extension of a ray "
                                      "to a virtual image")
