#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2022 Michael J. Hayford
""" Lightweight manager class to connect an optical scene to its views

.. Created on Mon Mar 21 13:48:20 2022

.. codeauthor: Michael J. Hayford
"""
import logging

from collections import namedtuple

logger = logging.getLogger(__name__)

ModelInfo = namedtuple('ModelInfo', ['model', 'fct', 'args', 'kwargs'])
ModelInfo.__new__.__defaults__ = (None, (), {})
ModelInfo.__doc__ = "package of a model and a view update function"
ModelInfo.model.__doc__ = "object associated with view update function"
ModelInfo.fct.__doc__ = "view update function, can be None"
ModelInfo.args.__doc__ = "list of fct arguments"
ModelInfo.kwargs.__doc__ = "list of fct keyword arguments"


class AppManager:
    """ Lightweight model/view manager class

    The main function of AppManager is refresh_gui(). It is called when the
    state of the model changes, updates the model and then calls the
    refresh function of each view of that model. Views therefore never see
    images computed from different inputs than the rays.

    Attributes:
        model: the active :class:`~.OpticalScene`

            model is expected to respond to:

                - update_model()
                - name()

        view_dict: keys are views, values are ModelInfo tuples
    """

    def __init__(self, model=None):
        self.view_dict = {}
        self.model = None
        self.set_model(model)

    def _tag_model(self, model):
        if model is not None:
            if getattr(model, 'app_manager', None) is None:
                model.app_manager = self

    def set_model(self, model):
        self.model = model
        self._tag_model(model)

    def add_view(self, view, fct, *args, **kwargs):
        """ Add a view of the active model

        Args:
            view: the view, used as a key
            fct: view update function, called as fct(*args, **kwargs)

        Returns:
            returns the input view
        """
        self.view_dict[view] = ModelInfo(self.model, fct, args, kwargs)
        return view

    def delete_view(self, view):
        """ removes view from the view dictionary """
        logger.debug("AppManager.delete_view: %s", view)
        self.view_dict.pop(view, None)

    def close_model(self):
        """ remove all views associated with the active model """
        cur_model = self.model
        for view, mi in list(self.view_dict.items()):
            if mi.model is cur_model:
                self.delete_view(view)
        if cur_model is not None:
            if getattr(cur_model, 'app_manager', None) is self:
                cur_model.app_manager = None
            self.model = None

    def refresh_gui(self, **kwargs):
        """ update the active model and refresh its dependent views """
        if self.model is not None:
            self.model.update_model(**kwargs)
        self.refresh_views(**kwargs)

    def refresh_views(self, **kwargs):
        """ refresh the dependent views of the active model """
        # traverse a copy of the view dict, errant views are removed
        for view, mi in dict(self.view_dict).items():
            if mi.model is self.model and mi.fct is not None:
                try:
                    mi.fct(*mi.args, **{**kwargs, **mi.kwargs})
                except RuntimeError as rte:
                    logger.warning("removing view %s: %s", view, rte)
                    del self.view_dict[view]

    def on_view_activated(self, view):
        """ Makes the model associated with view the active model """
        if view is not None:
            try:
                mi = self.view_dict[view]
            except KeyError:
                logger.debug('view "%s" not in view_dict', view)
            else:
                model = mi.model
                if model is not None and model is not self.model:
                    logger.debug("switch model to %s", model.name())
                    self.model = model
                    self.refresh_views()

    def listobj_str(self):
        if self.model is not None:
            o_str = f"active model: {self.model.name()}\n"
        else:
            o_str = "no active model\n"
        for view, mi in dict(self.view_dict).items():
            model_name = mi.model.name() if mi.model is not None \
                else "No model"
            o_str += f"view: {view!r}, {model_name}\n"
        return o_str
