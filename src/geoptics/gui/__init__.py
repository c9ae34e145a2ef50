""" package connecting the optical scene to interactive consumers

    The modules in this package are:

        - :mod:`~.appmanager` - refreshes views after each scene update
        - :mod:`~.jumppoints` - navigation points for measuring tools
"""
