#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" tests for the projection screen

.. Created on Mon Mar 28 14:16:03 2022

.. codeauthor: Michael J. Hayford
"""

import math
import pytest
from pytest import approx
import numpy.testing as npt

from geoptics.elem.projectionscreen import ProjectionScreen
from geoptics.optical.opticerror import InvalidParameterError


def test_default_screen():
    screen = ProjectionScreen()
    npt.assert_array_equal(screen.position, [200., 0.])
    assert screen.half_height == approx(61.5)
    shape = screen.screen_shape_translated()
    assert shape.shape == (4, 2)
    # far edge on the left is shorter than the near edge on the right
    npt.assert_allclose(shape[0], [179., 56.])
    npt.assert_allclose(shape[1], [221., 67.])
    npt.assert_allclose(screen.bisector_line_translated(),
                        [[200., 61.5], [200., -61.5]])


def test_contains_point():
    screen = ProjectionScreen()
    assert screen.contains_point((200., 0.))
    assert screen.contains_point((220., 66.))
    assert not screen.contains_point((200., 66.))
    assert not screen.contains_point((230., 0.))


def test_move_and_reset():
    calls = []
    screen = ProjectionScreen()
    screen.add_observer(lambda s: calls.append(s))
    screen.position = (150., 10.)
    screen.position = (150., 10.)
    assert calls == [screen]
    npt.assert_allclose(screen.bisector_line_translated()[1],
                        [150., -51.5])
    assert screen.listobj_str() == "screen: 150, 10\n"

    screen.reset()
    npt.assert_array_equal(screen.position, [200., 0.])
    assert len(calls) == 2


def test_invalid_position():
    with pytest.raises(InvalidParameterError):
        ProjectionScreen(position=(math.nan, 0.))
