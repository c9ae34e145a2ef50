""" package supplying paraxial image formation and lens guides

    The modules in this package are:

        - :mod:`~.imageformation`
        - :mod:`~.guides`
"""
