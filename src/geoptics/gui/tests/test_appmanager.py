#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" tests for connecting scenes to their views

.. Created on Mon Mar 21 15:20:41 2022

.. codeauthor: Michael J. Hayford
"""

import unittest
import numpy.testing as npt

from geoptics.elem.optic import create_lens
from geoptics.elem.opticalobject import ArrowObject
from geoptics.gui.appmanager import AppManager
from geoptics.optical.opticalmodel import OpticalScene


class RecordingView:
    """ view that records the scene results it is refreshed with """
    def __init__(self, scene):
        self.scene = scene
        self.refreshes = []

    def refresh(self, **kwargs):
        ar = self.scene.analysis_results
        image = ar['images'][0]
        first_ray = ar['rays'][0][0]
        self.refreshes.append((image.position.copy(),
                               first_ray[1].end_point.copy(),
                               kwargs.get('src_model')))


class AppManagerTestCase(unittest.TestCase):
    def setUp(self):
        self.lens = create_lens(focal_length_control='direct')
        self.lens.focal_length_model.focal_length_magnitude = 20.
        self.arrow = ArrowObject((-40., 10.), magnitude=30.)
        self.scene = OpticalScene(self.lens, [self.arrow], name='arrow')
        self.app_manager = AppManager(self.scene)
        self.view = RecordingView(self.scene)
        self.app_manager.add_view(self.view, self.view.refresh)

    def test_model_is_tagged(self):
        assert self.scene.app_manager is self.app_manager

    def test_views_see_consistent_results(self):
        self.arrow.position = (-30., 10.)
        self.lens.focal_length_model.focal_length_magnitude = 25.
        assert len(self.view.refreshes) == 2
        for image_pos, ray_end, src in self.view.refreshes:
            # the rays converge at the image they were refreshed with
            npt.assert_allclose(ray_end, image_pos)
        # f=25, d0=30: di=150, m=-5
        npt.assert_allclose(self.view.refreshes[-1][0], [150., -50.])
        assert self.view.refreshes[0][2] is self.arrow
        assert self.view.refreshes[1][2] is self.lens

    def test_refresh_gui(self):
        self.app_manager.refresh_gui()
        assert len(self.view.refreshes) == 1

    def test_delete_view(self):
        self.app_manager.delete_view(self.view)
        self.arrow.position = (-30., 10.)
        assert self.view.refreshes == []

    def test_failing_view_is_removed(self):
        def closed_view(**kwargs):
            raise RuntimeError("view was closed")
        self.app_manager.add_view('closed', closed_view)
        self.arrow.position = (-30., 10.)
        assert 'closed' not in self.app_manager.view_dict
        assert len(self.view.refreshes) == 1

    def test_view_args(self):
        calls = []
        self.app_manager.add_view('args', lambda *args, **kwargs:
                                  calls.append((args, kwargs)),
                                  'top', scale=2)
        self.app_manager.refresh_views()
        assert calls == [(('top',), {'scale': 2})]

    def test_switch_active_scene(self):
        other = OpticalScene(create_lens(), [ArrowObject((-200., 40.))],
                             name='other')
        self.app_manager.set_model(other)
        other_view = RecordingView(other)
        self.app_manager.add_view(other_view, other_view.refresh)

        self.app_manager.on_view_activated(self.view)
        assert self.app_manager.model is self.scene
        assert len(self.view.refreshes) == 1

        # the inactive scene still updates itself, without view refreshes
        other.objects[0].position = (-150., 40.)
        assert other_view.refreshes == []
        npt.assert_allclose(other['images'][0].position,
                            [1200./7., -320./7.])

        assert 'active model: arrow' in self.app_manager.listobj_str()

    def test_close_model(self):
        self.app_manager.close_model()
        assert self.app_manager.model is None
        assert self.app_manager.view_dict == {}
        assert self.scene.app_manager is None
        # the scene keeps updating on its own
        self.arrow.position = (-30., 10.)
        npt.assert_allclose(self.scene['images'][0].position, [60., -20.])


if __name__ == '__main__':
    unittest.main(verbosity=2)
