#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2022 Michael J. Hayford
""" Lightweight change notification for model entities

    Model entities (optics, focal length models, optical objects) call
    :meth:`Observable.notify` after every accepted mutation. Interested
    parties, typically an :class:`~geoptics.optical.opticalmodel.OpticalScene`,
    register an update function with :meth:`Observable.add_observer`.

.. Created on Wed Mar 16 10:05:12 2022

.. codeauthor: Michael J. Hayford
"""
import logging

from collections import namedtuple

logger = logging.getLogger(__name__)

ObserverInfo = namedtuple('ObserverInfo', ['fct', 'args', 'kwargs'])
ObserverInfo.__new__.__defaults__ = ((), {})
ObserverInfo.fct.__doc__ = "update function, called with the source entity"
ObserverInfo.args.__doc__ = "list of fct arguments"
ObserverInfo.kwargs.__doc__ = "list of fct keyword arguments"


class Observable:
    """ Mixin class that keeps a list of update functions

    Subclasses must call ``Observable.__init__`` and then :meth:`notify`
    whenever their state changes.
    """

    def __init__(self):
        self._observers = []

    def add_observer(self, fct, *args, **kwargs):
        """ Register fct(source, *args, **kwargs) for change notifications.

        Returns:
            the ObserverInfo, which can be passed to :meth:`remove_observer`
        """
        info = ObserverInfo(fct, args, kwargs)
        self._observers.append(info)
        return info

    def remove_observer(self, info):
        try:
            self._observers.remove(info)
        except ValueError:
            logger.debug("observer %s not registered with %s",
                         info, type(self).__name__)

    def notify(self):
        """ call every registered update function, in registration order """
        for info in list(self._observers):
            info.fct(self, *info.args, **info.kwargs)
