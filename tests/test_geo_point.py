"""
Tests for GeoPoint.
"""

import dataclasses
import math
import unittest

from geosphere import GeoPoint, Latitude, Longitude
from geosphere.format import DmsFormatter
from geosphere.unit import Degree, Kilometer, Meter, NauticalMile

# one degree of arc on the default sphere, in km
ONE_DEGREE_KM = 6371.0 * math.pi / 180


class DecimalFormatter:
    """Formatter that renders coordinates as plain decimal text."""

    def format_latitude(self, value, fmt="dms", dp=None):
        return f"LAT {value:.1f}"

    def format_longitude(self, value, fmt="dms", dp=None):
        return f"LON {value:.1f}"


class TestGeoPointConstruction(unittest.TestCase):
    """Test building points from loosely typed input."""

    def test_numbers(self):
        """Test plain degrees are stored as given."""
        point = GeoPoint(-0.0983, 51.5136)
        self.assertEqual(point.longitude, -0.0983)
        self.assertEqual(point.latitude, 51.5136)
        self.assertEqual(point.radius, 6371.0)

    def test_numeric_strings(self):
        """Test numeric strings are parsed."""
        self.assertEqual(GeoPoint(" -0.0983 ", "51.5136"), GeoPoint(-0.0983, 51.5136))

    def test_invalid_input_is_nan(self):
        """Test non-numeric input is stored as NaN."""
        point = GeoPoint("west", None)
        self.assertTrue(math.isnan(point.longitude))
        self.assertTrue(math.isnan(point.latitude))

    def test_radius_units(self):
        """Test radius accepts a length unit."""
        self.assertAlmostEqual(GeoPoint(0, 0, NauticalMile(3440)).radius, 6370.88)
        self.assertEqual(GeoPoint(0, 0, "100").radius, 100.0)

    def test_angle_units(self):
        """Test coordinates accept angle units."""
        point = GeoPoint(Degree(10), Latitude(20))
        self.assertAlmostEqual(point.longitude, 10.0)
        self.assertAlmostEqual(point.latitude, 20.0)

    def test_from_deg_and_from_rad(self):
        """Test the latitude-first constructors."""
        self.assertEqual(GeoPoint.from_deg(51.5, -0.1), GeoPoint(-0.1, 51.5))
        point = GeoPoint.from_rad(math.pi / 4, math.pi / 2)
        self.assertAlmostEqual(point.latitude, 45.0)
        self.assertAlmostEqual(point.longitude, 90.0)

    def test_immutable(self):
        """Test points cannot be modified."""
        point = GeoPoint(0, 0)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            point.latitude = 10

    def test_typed_views(self):
        """Test latitude and longitude units do not mix."""
        point = GeoPoint(-0.0983, 51.5136)
        self.assertIsInstance(point.latitude_unit, Latitude)
        self.assertIsInstance(point.longitude_unit, Longitude)
        with self.assertRaises(TypeError):
            point.latitude_unit + point.longitude_unit


class TestGreatCircle(unittest.TestCase):
    """Test great-circle measurements."""

    def setUp(self):
        self.st_pauls = GeoPoint(-0.0983, 51.5136)
        self.greenwich = GeoPoint(-0.0015, 51.4778)

    def test_distance(self):
        """Test haversine distance between two London landmarks."""
        self.assertAlmostEqual(self.st_pauls.distance_km_to(self.greenwich), 7.794, delta=0.002)
        self.assertEqual(self.st_pauls.distance_to(self.greenwich), "7.794")

    def test_distance_symmetric(self):
        """Test distance does not depend on direction."""
        self.assertEqual(
            self.st_pauls.distance_to(self.greenwich), self.greenwich.distance_to(self.st_pauls)
        )

    def test_distance_to_self(self):
        """Test distance to the same point."""
        self.assertEqual(self.st_pauls.distance_to(self.st_pauls), "0.0000")

    def test_distance_precision(self):
        """Test the significant digits argument."""
        self.assertEqual(self.st_pauls.distance_to(self.greenwich, 2), "7.8")

    def test_distance_on_unit_sphere(self):
        """Test the radius scales the distance."""
        equator = GeoPoint(0, 0, radius=1)
        pole = GeoPoint(0, 90, radius=1)
        self.assertEqual(equator.distance_to(pole), "1.571")

    def test_distance_invalid_point(self):
        """Test an invalid point gives NaN."""
        self.assertEqual(self.st_pauls.distance_to(GeoPoint("x", 0)), "NaN")

    def test_distance_rejects_non_points(self):
        """Test passing something other than a GeoPoint raises TypeError."""
        with self.assertRaises(TypeError):
            self.st_pauls.distance_to((51.5, -0.1))

    def test_bearing(self):
        """Test bearings along the equator and a meridian."""
        origin = GeoPoint(0, 0)
        self.assertAlmostEqual(origin.bearing_to(GeoPoint(1, 0)), 90.0)
        self.assertAlmostEqual(origin.bearing_to(GeoPoint(-1, 0)), 270.0)
        self.assertAlmostEqual(origin.bearing_to(GeoPoint(0, 1)), 0.0)
        self.assertAlmostEqual(origin.bearing_to(GeoPoint(0, -1)), 180.0)

    def test_bearing_range(self):
        """Test bearings are within [0, 360)."""
        bearing = self.st_pauls.bearing_to(self.greenwich)
        self.assertGreaterEqual(bearing, 0.0)
        self.assertLess(bearing, 360.0)

    def test_final_bearing(self):
        """Test final bearing on a great circle through higher latitudes."""
        origin = GeoPoint(0, 0)
        self.assertAlmostEqual(origin.final_bearing_to(GeoPoint(1, 0)), 90.0)
        start = GeoPoint(-10, 50)
        end = GeoPoint(10, 50)
        self.assertLess(start.bearing_to(end), 90.0)
        self.assertGreater(start.final_bearing_to(end), 90.0)

    def test_midpoint(self):
        """Test the midpoint of an equatorial segment."""
        mid = GeoPoint(0, 0).midpoint_to(GeoPoint(10, 0))
        self.assertAlmostEqual(mid.longitude, 5.0)
        self.assertAlmostEqual(mid.latitude, 0.0)

    def test_midpoint_halves_the_distance(self):
        """Test the midpoint lies on the path, half way along it."""
        paris = GeoPoint(2.3522, 48.8566)
        mid = self.st_pauls.midpoint_to(paris)
        first = self.st_pauls.distance_km_to(mid)
        second = mid.distance_km_to(paris)
        self.assertAlmostEqual(first + second, self.st_pauls.distance_km_to(paris), places=6)
        self.assertAlmostEqual(first, second, places=6)

    def test_bearings_to_invalid_point(self):
        """Test bearings towards an invalid point are NaN."""
        invalid = GeoPoint(0, "x")
        self.assertTrue(math.isnan(self.st_pauls.bearing_to(invalid)))
        self.assertTrue(math.isnan(self.st_pauls.final_bearing_to(invalid)))
        self.assertTrue(math.isnan(self.st_pauls.rhumb_bearing_to(invalid)))

    def test_midpoint_keeps_radius(self):
        """Test the midpoint inherits the radius of the first point."""
        mid = GeoPoint(0, 0, radius=100).midpoint_to(GeoPoint(10, 0))
        self.assertEqual(mid.radius, 100.0)

    def test_destination(self):
        """Test travelling one degree east along the equator."""
        point = GeoPoint(0, 0).destination_point(90, ONE_DEGREE_KM)
        self.assertAlmostEqual(point.longitude, 1.0, places=6)
        self.assertAlmostEqual(point.latitude, 0.0, places=6)

    def test_destination_units(self):
        """Test bearing and distance given as units."""
        by_units = GeoPoint(0, 0).destination_point(Degree(90), Meter(ONE_DEGREE_KM * 1000))
        self.assertAlmostEqual(by_units.longitude, 1.0, places=6)

    def test_destination_crosses_antimeridian(self):
        """Test longitudes are normalised after crossing 180°."""
        point = GeoPoint(179.5, 0).destination_point(90, ONE_DEGREE_KM)
        self.assertAlmostEqual(point.longitude, -179.5, places=6)

    def test_destination_round_trip(self):
        """Test destination at the measured bearing and distance returns to the target."""
        bearing = self.st_pauls.bearing_to(self.greenwich)
        distance = self.st_pauls.distance_km_to(self.greenwich)
        arrived = self.st_pauls.destination_point(bearing, distance)
        self.assertAlmostEqual(arrived.latitude, self.greenwich.latitude, places=6)
        self.assertAlmostEqual(arrived.longitude, self.greenwich.longitude, places=6)

    def test_destination_invalid_distance(self):
        """Test a non-numeric distance gives a NaN point."""
        point = GeoPoint(0, 0).destination_point(90, "far")
        self.assertTrue(math.isnan(point.latitude))
        self.assertEqual(point.to_string(), "-,-")


class TestRhumbLine(unittest.TestCase):
    """Test rhumb-line measurements."""

    def test_east_west_distance(self):
        """Test a rhumb line along the equator."""
        self.assertEqual(GeoPoint(0, 0).rhumb_distance_to(GeoPoint(1, 0)), "111.2")

    def test_antimeridian_distance(self):
        """Test the shorter way across the antimeridian is used."""
        self.assertEqual(GeoPoint(179, 0).rhumb_distance_to(GeoPoint(-179, 0)), "222.4")

    def test_bearings(self):
        """Test cardinal rhumb bearings."""
        origin = GeoPoint(0, 0)
        self.assertAlmostEqual(origin.rhumb_bearing_to(GeoPoint(1, 0)), 90.0)
        self.assertAlmostEqual(origin.rhumb_bearing_to(GeoPoint(-1, 0)), 270.0)
        self.assertAlmostEqual(origin.rhumb_bearing_to(GeoPoint(0, 1)), 0.0)
        self.assertAlmostEqual(origin.rhumb_bearing_to(GeoPoint(0, -1)), 180.0)

    def test_bearing_across_antimeridian(self):
        """Test the bearing heads east from 179°E to 179°W."""
        self.assertAlmostEqual(GeoPoint(179, 0).rhumb_bearing_to(GeoPoint(-179, 0)), 90.0)

    def test_destination_round_trip(self):
        """Test rhumb destination lands on the measured target."""
        start = GeoPoint(-0.0983, 51.5136)
        target = GeoPoint(2.3522, 48.8566)
        arrived = start.rhumb_destination_point(
            start.rhumb_bearing_to(target), start.rhumb_distance_km_to(target)
        )
        self.assertAlmostEqual(arrived.latitude, target.latitude, places=6)
        self.assertAlmostEqual(arrived.longitude, target.longitude, places=6)

    def test_destination_due_east_on_equator(self):
        """Test a due-east rhumb line along the equator moves the longitude."""
        point = GeoPoint(0, 0).rhumb_destination_point(90, ONE_DEGREE_KM)
        self.assertAlmostEqual(point.longitude, 1.0, places=6)
        self.assertAlmostEqual(point.latitude, 0.0, places=6)

    def test_destination_due_east_at_sixty_north(self):
        """Test a due-east rhumb line at 60°N covers twice the longitude."""
        point = GeoPoint(0, 60).rhumb_destination_point(90, ONE_DEGREE_KM)
        self.assertAlmostEqual(point.longitude, 2.0, places=6)
        self.assertAlmostEqual(point.latitude, 60.0, places=6)

    def test_destination_past_north_pole(self):
        """Test a path running past the north pole is reflected back."""
        point = GeoPoint(0, 89).rhumb_destination_point(0, 2 * ONE_DEGREE_KM)
        self.assertAlmostEqual(point.latitude, 89.0, places=6)

    def test_destination_past_south_pole(self):
        """Test a path running past the south pole stays in the southern hemisphere."""
        point = GeoPoint(0, -89).rhumb_destination_point(180, 2 * ONE_DEGREE_KM)
        self.assertAlmostEqual(point.latitude, -89.0, places=6)

    def test_invalid_point(self):
        """Test an invalid point gives NaN."""
        self.assertEqual(GeoPoint(0, 0).rhumb_distance_to(GeoPoint(0, "north")), "NaN")


class TestDerived(unittest.TestCase):
    """Test square sampling, bounding boxes and array output."""

    def setUp(self):
        self.point = GeoPoint(-0.0983, 51.5136)

    def test_square_points(self):
        """Test the eight compass samples."""
        square = self.point.get_square_points(1)
        self.assertEqual(list(square), ["n", "ne", "e", "es", "s", "sw", "w", "wn"])
        self.assertGreater(square["n"].latitude, self.point.latitude)
        self.assertAlmostEqual(square["n"].longitude, self.point.longitude)
        self.assertLess(square["w"].longitude, self.point.longitude)
        self.assertEqual(self.point.distance_to(square["es"]), "1.000")

    def test_square_points_as_strings(self):
        """Test the string form of the samples."""
        square = self.point.get_square_points(Kilometer(1), as_strings=True)
        for text in square.values():
            self.assertIsInstance(text, str)
            self.assertEqual(len(text.split(",")), 2)

    def test_in_square(self):
        """Test box membership with inclusive edges."""
        southwest = GeoPoint(-1, 51)
        northeast = GeoPoint(0, 52)
        self.assertTrue(self.point.in_square(southwest, northeast))
        self.assertTrue(GeoPoint(-1, 51).in_square(southwest, northeast))
        self.assertTrue(GeoPoint(0, 52).in_square(southwest, northeast))
        self.assertFalse(GeoPoint(0.5, 51.5).in_square(southwest, northeast))

    def test_to_array(self):
        """Test [lon, lat] output."""
        self.assertEqual(self.point.to_array(), [-0.0983, 51.5136])
        self.assertEqual(self.point.to_array(2), [-0.1, 51.51])

    def test_to_lng_lat(self):
        """Test "lon,lat" output."""
        self.assertEqual(self.point.to_lng_lat(), "-0.0983,51.5136")
        self.assertEqual(self.point.to_lng_lat(2), "-0.10,51.51")
        self.assertEqual(GeoPoint(12, 0).to_lng_lat(), "12,0")


class TestFormatting(unittest.TestCase):
    """Test text output."""

    def setUp(self):
        self.point = GeoPoint(-0.0983, 51.5136)

    def test_lat_lon_raw(self):
        """Test lat() and lon() return degrees without a format."""
        self.assertEqual(self.point.lat(), 51.5136)
        self.assertEqual(self.point.lon(), -0.0983)

    def test_lat_lon_formatted(self):
        """Test lat() and lon() with a format."""
        self.assertEqual(self.point.lat("dms"), "51°30′49″N")
        self.assertEqual(self.point.lon("dm"), "000°05.90′W")
        self.assertEqual(self.point.lat("d", 2), "51.51°N")

    def test_to_string(self):
        """Test the default text form."""
        self.assertEqual(self.point.to_string(), "000°05′54″W, 51°30′49″N")
        self.assertEqual(str(self.point), "000°05′54″W, 51°30′49″N")
        self.assertEqual(self.point.to_string("d", 2), "000.10°W, 51.51°N")

    def test_invalid_to_string(self):
        """Test an invalid point renders as '-,-'."""
        self.assertEqual(GeoPoint(0, "x").to_string(), "-,-")

    def test_custom_formatter(self):
        """Test a point uses the formatter it was created with."""
        point = GeoPoint(-0.0983, 51.5136, formatter=DecimalFormatter())
        self.assertEqual(point.to_string(), "LON -0.1, LAT 51.5")
        self.assertEqual(point, self.point)

    def test_derived_points_keep_formatter(self):
        """Test new points inherit the formatter."""
        formatter = DecimalFormatter()
        point = GeoPoint(0, 0, formatter=formatter)
        self.assertIs(point.destination_point(90, 10).formatter, formatter)
        self.assertIs(point.midpoint_to(GeoPoint(1, 1)).formatter, formatter)

    def test_default_formatter(self):
        """Test the default formatter is DmsFormatter."""
        self.assertIsInstance(self.point.formatter, DmsFormatter)


if __name__ == "__main__":
    unittest.main()
