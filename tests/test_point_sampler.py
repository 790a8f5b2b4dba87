"""Tests for point sampling and sampling regions."""

import pytest
import numpy as np
from scipy.spatial.distance import pdist

from sts_mapgen.core.regions import CircleRegion, PolygonRegion, circle_between
from sts_mapgen.core.point_sampler import generate_points, poisson_disk_sample


START = (0.0, 0.0)
END = (0.0, 400.0)


class TestRegions:
    """Test region geometry."""

    def test_circle_between_anchors(self):
        """Test that the default circle has the anchors on its rim."""
        region = circle_between(START, END)

        assert region.center_x == 0.0
        assert region.center_y == 200.0
        assert region.radius == 200.0
        assert region.contains(np.array([START, END])).all()

    def test_circle_contains(self):
        region = CircleRegion(0.0, 0.0, 10.0)
        mask = region.contains(np.array([[0, 0], [10, 0], [7.5, 7.5]]))

        assert mask.tolist() == [True, True, False]

    def test_polygon_region(self):
        """Test convex polygon bounds and membership."""
        region = PolygonRegion([(0, 0), (100, 0), (100, 50), (0, 50)])

        assert region.bounds() == (0.0, 0.0, 100.0, 50.0)
        mask = region.contains(np.array([[50, 25], [150, 25], [100, 50]]))
        assert mask.tolist() == [True, False, True]

    def test_non_convex_polygon_rejected(self):
        """Test that an L-shaped outline is refused."""
        with pytest.raises(ValueError):
            PolygonRegion([(0, 0), (20, 0), (20, 10), (10, 10), (10, 20), (0, 20)])

    def test_empty_polygon_rejected(self):
        with pytest.raises(ValueError):
            PolygonRegion([(0, 0), (10, 0), (20, 0)])


class TestPoissonDisk:
    """Test raw Poisson-disk sampling."""

    def test_minimum_separation(self):
        """Test that no two samples are closer than the radius."""
        rng = np.random.default_rng(7)
        points = poisson_disk_sample(300, 200, 20, rng)

        assert len(points) > 20
        assert pdist(points).min() >= 20 - 1e-9

    def test_point_bounds(self):
        """Test that all samples stay inside the box."""
        rng = np.random.default_rng(7)
        points = poisson_disk_sample(300, 200, 20, rng)

        assert np.all(points[:, 0] >= 0)
        assert np.all(points[:, 0] < 300)
        assert np.all(points[:, 1] >= 0)
        assert np.all(points[:, 1] < 200)

    def test_empty_area(self):
        points = poisson_disk_sample(0, 100, 10, np.random.default_rng(1))
        assert points.shape == (0, 2)

    def test_reproducibility(self):
        """Test that the same seed gives the same samples."""
        points1 = poisson_disk_sample(100, 100, 10, np.random.default_rng(3))
        points2 = poisson_disk_sample(100, 100, 10, np.random.default_rng(3))

        np.testing.assert_array_equal(points1, points2)


class TestGeneratePoints:
    """Test anchored point generation."""

    @pytest.fixture
    def points(self):
        region = circle_between(START, END)
        return generate_points(region, START, END, 40, rng=np.random.default_rng(11))

    def test_anchors_last(self, points):
        """Test that start and end sit at n-2 and n-1."""
        np.testing.assert_array_equal(points[-2], START)
        np.testing.assert_array_equal(points[-1], END)

    def test_anchors_present_once(self, points):
        for anchor in (START, END):
            assert np.sum(np.all(points == anchor, axis=1)) == 1

    def test_no_coincident_points(self, points):
        assert len(np.unique(points, axis=0)) == len(points)

    def test_points_inside_region(self, points):
        region = circle_between(START, END)
        assert region.contains(points[:-2]).all()

    def test_points_away_from_anchors(self, points):
        """Test that sampled points keep min_radius from both anchors."""
        sampled = points[:-2]
        assert len(sampled) > 10
        assert np.all(np.linalg.norm(sampled - START, axis=1) >= 40)
        assert np.all(np.linalg.norm(sampled - END, axis=1) >= 40)

    def test_separation(self, points):
        assert pdist(points[:-2]).min() >= 40 - 1e-9

    def test_degenerate_region(self):
        """Test that a region too small for any point yields just the anchors."""
        start, end = (0.0, 0.0), (0.0, 10.0)
        points = generate_points(circle_between(start, end), start, end, 80,
                                 rng=np.random.default_rng(0))

        assert len(points) == 2
        np.testing.assert_array_equal(points, [start, end])

    def test_polygon_region_sampling(self):
        region = PolygonRegion([(0, 0), (200, 0), (200, 200), (0, 200)])
        points = generate_points(region, (100, 0), (100, 200), 25,
                                 rng=np.random.default_rng(5))

        assert region.contains(points).all()
        assert len(points) > 2

    def test_invalid_radius(self):
        with pytest.raises(ValueError):
            generate_points(circle_between(START, END), START, END, 0)

    def test_identical_anchors(self):
        with pytest.raises(ValueError):
            generate_points(CircleRegion(0, 0, 100), START, START, 10)


@pytest.mark.parametrize("radius", [20, 40, 80])
def test_various_radii(radius):
    """Test anchor inclusion across radii."""
    points = generate_points(circle_between(START, END), START, END, radius,
                             rng=np.random.default_rng(radius))

    assert len(points) >= 2
    np.testing.assert_array_equal(points[-2:], [START, END])


def test_shared_generator_seed():
    """Test that reseeding the shared generator reproduces unseeded calls."""
    from sts_mapgen.utils.random import set_random_seed

    region = circle_between(START, END)
    set_random_seed(17)
    points1 = generate_points(region, START, END, 50)
    set_random_seed(17)
    points2 = generate_points(region, START, END, 50)

    np.testing.assert_array_equal(points1, points2)
