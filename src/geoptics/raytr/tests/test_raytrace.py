#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" tests for tracing rays through a thin lens or mirror

.. Created on Fri Mar 18 11:27:33 2022

.. codeauthor: Michael J. Hayford
"""

import unittest
from pytest import approx
import numpy as np
import numpy.testing as npt

from geoptics.elem.optic import create_lens, create_mirror
from geoptics.elem.opticalobject import PointObject
from geoptics.optical.model_constants import SCENE_BOUNDS, Bounds2
from geoptics.optical.model_enums import RaysMode
from geoptics.parax.imageformation import compute_image
from geoptics.raytr.raytrace import (trace_rays, ray_directions,
                                     real_segments, virtual_segments)
from geoptics.util.misc_math import normalize


def lens_with_focal_length(f, **kwargs):
    lens = create_lens(focal_length_control='direct', **kwargs)
    lens.focal_length_model.focal_length_magnitude = f
    return lens


def assert_inside(pt, bounds=SCENE_BOUNDS, tol=1e-6):
    assert np.all(np.isfinite(pt))
    assert bounds.min_x - tol <= pt[0] <= bounds.max_x + tol
    assert bounds.min_y - tol <= pt[1] <= bounds.max_y + tol


def direction(seg):
    return normalize(seg.end_point - seg.start_point)


class RayDirectionsTestCase(unittest.TestCase):
    def setUp(self):
        self.lens = lens_with_focal_length(20.)
        self.source = np.array([-40., 10.])

    def test_none(self):
        assert ray_directions(self.source, self.lens, 'none') == []

    def test_marginal(self):
        dirs = ray_directions(self.source, self.lens, RaysMode.MARGINAL)
        assert len(dirs) == 2
        npt.assert_allclose(dirs[0], normalize(np.array([40., 30.])))
        npt.assert_allclose(dirs[1], normalize(np.array([40., -50.])))

    def test_principal(self):
        dirs = ray_directions(self.source, self.lens, RaysMode.PRINCIPAL)
        assert len(dirs) == 3
        npt.assert_allclose(dirs[0], [1., 0.])
        npt.assert_allclose(dirs[1], normalize(np.array([40., -10.])))
        # through the object side focal point, (-20, 0)
        npt.assert_allclose(dirs[2], normalize(np.array([20., -10.])))

    def test_principal_flat_optic(self):
        lens = create_lens(optic_shape='flat')
        dirs = ray_directions(self.source, lens, RaysMode.PRINCIPAL)
        assert len(dirs) == 2

    def test_many(self):
        dirs = ray_directions(self.source, self.lens, 'many')
        assert len(dirs) == 15
        dirs = ray_directions(self.source, self.lens, 'many',
                              many_rays_count=5)
        assert len(dirs) == 5
        for d in dirs:
            assert np.linalg.norm(d) == approx(1.)


class LensRayTraceTestCase(unittest.TestCase):
    def setUp(self):
        self.lens = lens_with_focal_length(20.)

    def test_none_mode_is_empty(self):
        obj = PointObject((-40., 10.))
        assert trace_rays(obj, self.lens, rays_mode='none') == []

    def test_marginal_real_image(self):
        obj = PointObject((-40., 10.))
        image = compute_image(obj, self.lens)
        rays = trace_rays(obj, self.lens, image, RaysMode.MARGINAL)
        assert len(rays) == 2
        for ray, edge in zip(rays, (self.lens.top_point,
                                    self.lens.bottom_point)):
            assert len(ray) == 3
            npt.assert_allclose(ray[0].start_point, obj.position)
            npt.assert_allclose(ray[0].end_point, edge)
            npt.assert_allclose(ray[1].start_point, edge)
            npt.assert_allclose(ray[1].end_point, image.position, atol=1e-9)
            npt.assert_allclose(direction(ray[2]), direction(ray[1]))
            assert not any(seg.is_virtual for seg in ray)
        assert virtual_segments(rays) == []
        assert len(real_segments(rays)) == 6

    def test_marginal_virtual_image(self):
        obj = PointObject((-10., 5.))
        image = compute_image(obj, self.lens)
        rays = trace_rays(obj, self.lens, image, 'marginal')
        assert len(rays) == 2
        for ray in rays:
            assert [seg.is_virtual for seg in ray] == [False, False, True]
            # the light diverges away from the virtual image
            assert direction(ray[1])[0] > 0.
            npt.assert_allclose(ray[2].end_point, image.position)
            npt.assert_allclose(direction(ray[2]), -direction(ray[1]),
                                atol=1e-12)
        assert len(virtual_segments(rays)) == 2

    def test_many_rays_converge(self):
        obj = PointObject((-40., 0.))
        image = compute_image(obj, self.lens)
        rays = trace_rays(obj, self.lens, image, 'many')
        assert len(rays) == 15
        for ray in rays:
            npt.assert_allclose(ray[1].end_point, image.position,
                                atol=1e-9)

    def test_rays_missing_the_optic_are_absent(self):
        obj = PointObject((-40., 300.))
        rays = trace_rays(obj, self.lens, rays_mode='principal')
        # only the chief ray passes through the aperture
        assert len(rays) == 1
        npt.assert_allclose(rays[0][0].end_point, [0., 0.], atol=1e-9)

    def test_object_behind_lens(self):
        obj = PointObject((50., 0.))
        for mode in ('marginal', 'principal', 'many'):
            assert trace_rays(obj, self.lens, rays_mode=mode) == []

    def test_hit_points_within_aperture(self):
        obj = PointObject((-90., 70.))
        for mode in ('marginal', 'principal', 'many'):
            for ray in trace_rays(obj, self.lens, rays_mode=mode):
                assert self.lens.in_aperture(ray[0].end_point[1])

    def test_image_at_infinity(self):
        obj = PointObject((-20., 5.))
        image = compute_image(obj, self.lens)
        assert image.at_infinity
        chief_dir = normalize(np.array([20., -5.]))
        for mode in ('marginal', 'principal', 'many'):
            rays = trace_rays(obj, self.lens, image, mode)
            assert len(rays) > 0
            for ray in rays:
                assert len(ray) == 2
                for seg in ray:
                    assert_inside(seg.start_point)
                    assert_inside(seg.end_point)
                npt.assert_allclose(direction(ray[1]), chief_dir,
                                    atol=1e-9)

    def test_segments_clipped_to_scene(self):
        bounds = Bounds2(-100., -100., 100., 100.)
        obj = PointObject((-150., 30.))
        rays = trace_rays(obj, self.lens, rays_mode='many',
                          scene_bounds=bounds)
        assert len(rays) == 15
        for ray in rays:
            # the incident segment is truncated, not dropped
            assert ray[0].start_point[0] == approx(-100.)
            for seg in ray:
                assert_inside(seg.start_point, bounds)
                assert_inside(seg.end_point, bounds)

    def test_trace_is_repeatable(self):
        obj = PointObject((-55., 12.))
        rays1 = trace_rays(obj, self.lens, rays_mode='many')
        rays2 = trace_rays(obj, self.lens, rays_mode='many')
        assert len(rays1) == len(rays2)
        for ray1, ray2 in zip(rays1, rays2):
            for seg1, seg2 in zip(ray1, ray2):
                npt.assert_array_equal(seg1.start_point, seg2.start_point)
                npt.assert_array_equal(seg1.end_point, seg2.end_point)
                assert seg1.is_virtual == seg2.is_virtual


class MirrorRayTraceTestCase(unittest.TestCase):
    def setUp(self):
        self.mirror = create_mirror(radius_of_curvature=40.)

    def test_marginal_real_image(self):
        obj = PointObject((-60., 10.))
        image = compute_image(obj, self.mirror)
        npt.assert_allclose(image.position, [-30., -5.])
        rays = trace_rays(obj, self.mirror, image, 'marginal')
        assert len(rays) == 2
        for ray in rays:
            assert len(ray) == 3
            assert direction(ray[0])[0] > 0.
            # reflected back toward the objects
            assert direction(ray[1])[0] < 0.
            npt.assert_allclose(ray[1].end_point, image.position, atol=1e-9)

    def test_chief_ray_obeys_law_of_reflection(self):
        obj = PointObject((-60., 10.))
        image = compute_image(obj, self.mirror)
        rays = trace_rays(obj, self.mirror, image, 'principal')
        assert len(rays) == 3
        chief_ray = rays[1]
        npt.assert_allclose(chief_ray[0].end_point, [0., 0.], atol=1e-9)
        d_in = direction(chief_ray[0])
        d_out = direction(chief_ray[1])
        # mirror image of the incident direction in the optic plane
        npt.assert_allclose(d_out, [-d_in[0], d_in[1]], atol=1e-12)

    def test_image_at_infinity(self):
        obj = PointObject((-20., 5.))
        image = compute_image(obj, self.mirror)
        assert image.at_infinity
        reflected_chief = normalize(np.array([-20., -5.]))
        rays = trace_rays(obj, self.mirror, image, 'many')
        assert len(rays) == 15
        for ray in rays:
            assert len(ray) == 2
            npt.assert_allclose(direction(ray[1]), reflected_chief,
                                atol=1e-9)

    def test_convex_mirror_virtual_image(self):
        mirror = create_mirror(optic_shape='convex', radius_of_curvature=40.)
        obj = PointObject((-60., 0.))
        image = compute_image(obj, mirror)
        npt.assert_allclose(image.position, [15., 0.])
        rays = trace_rays(obj, mirror, image, 'marginal')
        assert len(rays) == 2
        for ray in rays:
            assert [seg.is_virtual for seg in ray] == [False, False, True]
            # reflected rays diverge from the image behind the mirror
            assert direction(ray[1])[0] < 0.
            npt.assert_allclose(ray[2].end_point, image.position,
                                atol=1e-9)
        top_ray, bottom_ray = rays
        assert direction(top_ray[1])[1] > 0.
        assert direction(bottom_ray[1])[1] < 0.

    def test_object_behind_mirror(self):
        obj = PointObject((30., 5.))
        for mode in ('marginal', 'principal', 'many'):
            assert trace_rays(obj, self.mirror, rays_mode=mode) == []


if __name__ == '__main__':
    unittest.main(verbosity=2)
