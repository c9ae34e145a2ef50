""" package supplying the optical scene model and its shared definitions

    The :mod:`~.optical` subpackage provides the top level scene model,
    :class:`~.opticalmodel.OpticalScene`, along with the enumerations,
    constants and exceptions shared by the rest of the package.

    The modules in this package are:

        - :mod:`~.opticalmodel`
        - :mod:`~.model_enums`
        - :mod:`~.model_constants`
        - :mod:`~.opticerror`
"""
