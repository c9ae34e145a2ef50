#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2022 Michael J. Hayford
""" Top level model of an optical scene: an optic and the objects it images

    The :class:`OpticalScene` subscribes to its optic, which forwards the
    changes of its active focal length model, to its objects and to its
    :class:`SceneVisibility`. Every accepted change triggers
    :meth:`OpticalScene.update_model`, which recomputes the derived results
    in dependency order: images, rays, guides and jump points.

.. Created on Tue Mar 22 09:26:15 2022

.. codeauthor: Michael J. Hayford
"""
import logging

from geoptics.optical import model_constants as mc
from geoptics.optical.model_enums import RaysMode, OpticType, to_enum
from geoptics.optical.opticerror import InvalidParameterError
from geoptics.parax.imageformation import compute_images
from geoptics.parax.guides import compute_guides
from geoptics.raytr.raytrace import trace_rays
from geoptics.raytr.lightspot import compute_light_spot
from geoptics.gui.jumppoints import build_jump_points
from geoptics.util.observable import Observable

logger = logging.getLogger(__name__)


def _flag(name, doc):
    def getter(self):
        return self._flags[name]

    def setter(self, value):
        self.set(**{name: value})
    return property(getter, setter, doc=doc)


class SceneVisibility(Observable):
    """ visibility toggles of the scene entities """

    defaults = {'optic': True,
                'focal_points': True,
                'two_f_points': False,
                'images': True,
                'virtual_images': True,
                'guides': True,
                }

    optic = _flag('optic', "show the optic")
    focal_points = _flag('focal_points', "show the focal points")
    two_f_points = _flag('two_f_points', "show the 2F points")
    images = _flag('images', "show the images")
    virtual_images = _flag('virtual_images', "show virtual images")
    guides = _flag('guides', "show the lens guides")

    def __init__(self, **kwargs):
        super().__init__()
        self._flags = dict(self.defaults)
        self._check_names(kwargs)
        self._flags.update({k: bool(v) for k, v in kwargs.items()})
        self._initial = dict(self._flags)

    def __repr__(self):
        return "{!s}({!s})".format(
            type(self).__name__,
            ", ".join(f"{k}={v}" for k, v in self._flags.items()))

    def _check_names(self, flags):
        unknown = set(flags) - set(self.defaults)
        if unknown:
            raise InvalidParameterError(
                f"unknown visibility toggle(s): {', '.join(sorted(unknown))}")

    def set(self, **flags):
        """ set one or more toggles, notifying observers once """
        self._check_names(flags)
        new_flags = {**self._flags, **{k: bool(v) for k, v in flags.items()}}
        if new_flags != self._flags:
            self._flags = new_flags
            self.notify()

    def reset(self):
        self.set(**self._initial)


class OpticalScene:
    """ Top level container of an optic and the optical objects it images

    Attributes:
        optic: the :class:`~.Optic`
        objects: list of :class:`~.OpticalObject`
        scene_bounds: :class:`~.Bounds2` the rays are clipped to
        visibility: :class:`SceneVisibility` toggles
        jump_point_registry: :class:`~.JumpPointRegistry` kept current with
            the scene's jump points, or None
        projection_screen: :class:`~.ProjectionScreen` catching the light
            leaving the optic, or None
        analysis_results: dict of the derived results, updated by
            :meth:`update_model`

            - 'images': list of :class:`~.OpticalImage`, one per object
            - 'rays': list, per object, of the traced rays
            - 'guides': list, per object, of :class:`~.Guides`, or None
              for a mirror or when guides are hidden
            - 'jump_points': list of :class:`~.ToolJumpPoint`
            - 'light_spots': list, per object, of the :class:`~.LightSpot`
              on the projection screen or None; None if there is no screen
    """

    def __init__(self, optic, objects=None, rays_mode=RaysMode.MARGINAL,
                 name='scene', scene_bounds=mc.SCENE_BOUNDS,
                 many_rays_count=mc.MANY_RAYS_COUNT, visibility=None,
                 jump_point_registry=None, projection_screen=None):
        self._name = name
        self._rays_mode = to_enum(RaysMode, rays_mode)
        self._many_rays_count = self._check_ray_count(many_rays_count)
        self._defaults = (self._rays_mode, self._many_rays_count)
        self.scene_bounds = scene_bounds
        self.visibility = (visibility if visibility is not None
                           else SceneVisibility())
        self.jump_point_registry = jump_point_registry
        self.app_manager = None
        self._updates_suspended = False
        self.analysis_results = {'images': [], 'rays': [], 'guides': None,
                                 'jump_points': [], 'light_spots': None}

        self.optic = optic
        optic.add_observer(self._entity_changed)
        self.visibility.add_observer(self._entity_changed)
        self.projection_screen = projection_screen
        if projection_screen is not None:
            projection_screen.add_observer(self._entity_changed)
        self.objects = []
        self._object_observers = {}
        for obj in (objects if objects is not None else []):
            self._attach_object(obj)

        self.update_model()

    def __repr__(self):
        return "{!s}({!r}, name={!r})".format(type(self).__name__,
                                              self.optic, self._name)

    def __getitem__(self, key):
        """ Provide mapping interface to the analysis results. """
        if key in ('ar', 'analysis_results'):
            return self.analysis_results
        return self.analysis_results[key]

    def name(self):
        return self._name

    @staticmethod
    def _check_ray_count(count):
        if not isinstance(count, int) or count < 1:
            raise InvalidParameterError(
                f"many_rays_count must be a positive integer, got {count!r}",
                name='many_rays_count', value=count)
        return count

    @property
    def rays_mode(self):
        return self._rays_mode

    @rays_mode.setter
    def rays_mode(self, value):
        mode = to_enum(RaysMode, value)
        if mode != self._rays_mode:
            self._rays_mode = mode
            self._entity_changed(self)

    @property
    def many_rays_count(self):
        return self._many_rays_count

    @many_rays_count.setter
    def many_rays_count(self, value):
        count = self._check_ray_count(value)
        if count != self._many_rays_count:
            self._many_rays_count = count
            self._entity_changed(self)

    @property
    def focal_length_control(self):
        return self.optic.focal_length_control

    @focal_length_control.setter
    def focal_length_control(self, value):
        self.optic.focal_length_control = value

    def _attach_object(self, obj):
        self.objects.append(obj)
        self._object_observers[id(obj)] = obj.add_observer(
            self._entity_changed)

    def add_object(self, obj):
        self._attach_object(obj)
        self._entity_changed(obj)
        return obj

    def remove_object(self, obj):
        self.objects.remove(obj)
        obj.remove_observer(self._object_observers.pop(id(obj)))
        self._entity_changed(obj)

    def _entity_changed(self, source):
        """ push the change of source through the scene and its views """
        if self._updates_suspended:
            return
        logger.debug("%s: %s changed", self._name, type(source).__name__)
        app_manager = self.app_manager
        if app_manager is not None and app_manager.model is self:
            app_manager.refresh_gui(src_model=source)
        else:
            self.update_model(src_model=source)

    def _light_spot(self, obj, image, obj_rays):
        # the spot is bounded by the rays through the edges of the aperture
        if self._rays_mode != RaysMode.MARGINAL:
            obj_rays = trace_rays(obj, self.optic, image, RaysMode.MARGINAL,
                                  scene_bounds=self.scene_bounds)
        return compute_light_spot(obj_rays, self.projection_screen)

    def update_model(self, **kwargs):
        """ recompute images, rays, guides, jump points and light spots

        Args:
            kwargs: possible keyword arguments including:

                - src_model: entity that originated the modification
        """
        optic = self.optic
        objects = self.objects

        images = compute_images(objects, optic)

        rays = [trace_rays(obj, optic, image, self._rays_mode,
                           scene_bounds=self.scene_bounds,
                           many_rays_count=self._many_rays_count)
                if obj.visible else []
                for obj, image in zip(objects, images)]

        if optic.optic_type == OpticType.LENS and self.visibility.guides:
            guides = [compute_guides(obj, optic, image)
                      for obj, image in zip(objects, images)]
        else:
            guides = None

        if self.projection_screen is not None:
            light_spots = [self._light_spot(obj, image, obj_rays)
                           if obj.visible else None
                           for obj, image, obj_rays
                           in zip(objects, images, rays)]
        else:
            light_spots = None

        jump_points = build_jump_points(optic, objects, images,
                                        self.visibility)

        self.analysis_results = {'images': images,
                                 'rays': rays,
                                 'guides': guides,
                                 'jump_points': jump_points,
                                 'light_spots': light_spots,
                                 }
        if self.jump_point_registry is not None:
            self.jump_point_registry.update(self._name, jump_points,
                                            optic_position=optic.position)

    def reset(self):
        """ restore the initial state of the scene and its entities """
        self._updates_suspended = True
        try:
            self.optic.reset()
            for obj in self.objects:
                obj.reset()
            self.visibility.reset()
            if self.projection_screen is not None:
                self.projection_screen.reset()
            self._rays_mode, self._many_rays_count = self._defaults
        finally:
            self._updates_suspended = False
        self._entity_changed(self)

    def listobj_str(self):
        o_str = f"{type(self).__name__}: {self._name}, "\
                f"rays mode: {self._rays_mode.value}\n"
        o_str += self.optic.listobj_str()
        images = self.analysis_results['images']
        rays = self.analysis_results['rays']
        for obj, image, obj_rays in zip(self.objects, images, rays):
            o_str += obj.listobj_str()
            if image.at_infinity:
                o_str += "  image at infinity\n"
            else:
                o_str += f"  {image.image_type.value} image: "\
                         f"{image.position[0]:.6g}, {image.position[1]:.6g}"\
                         f"   m={image.magnification:.6g}\n"
            o_str += f"  {len(obj_rays)} rays\n"
        if self.projection_screen is not None:
            o_str += self.projection_screen.listobj_str()
            spots = self.analysis_results['light_spots']
            for obj, spot in zip(self.objects, spots):
                if spot is not None:
                    label = obj.label or type(obj).__name__
                    o_str += f"  light spot of {label}: "\
                             f"{spot.position[1]:.6g} +/- "\
                             f"{spot.radius_y:.6g}"\
                             f"   intensity={spot.intensity:.3g}\n"
        return o_str
