import unittest
from vehicle_playback.playback import PlaybackController
from vehicle_playback.presentation import PresentationAdapter
from vehicle_playback.interfaces import RoutePoint

from test_playback import FakeLoop

class TestPresentationAdapter(unittest.TestCase):
    def _presenter(self, route):
        self.loop = FakeLoop()
        self.controller = PlaybackController(route, loop=self.loop)
        return PresentationAdapter(self.controller)

    def _advance_to(self, cursor):
        self.controller.play()
        for _ in range(cursor):
            self.controller.tick()

    def test_single_point_route(self):
        """Test a single point shows zero speed, arrival and no progress"""
        presenter = self._presenter([RoutePoint(0, 0, 0)])
        self.assertEqual(presenter.formatted_speed(), "0.00 km/h")
        self.assertEqual(presenter.formatted_eta(), "Arrived")
        self.assertEqual(presenter.progress_percent(), 0)
        self.assertEqual(presenter.current_point(), RoutePoint(0, 0, 0))
        self.assertEqual(presenter.current_point_number(), 1)

    def test_empty_route(self):
        """Test an empty route yields absent or neutral display values"""
        presenter = self._presenter([])
        self.assertIsNone(presenter.current_point())
        self.assertEqual(presenter.progress_percent(), 0)
        self.assertEqual(presenter.formatted_coordinates(), "")
        self.assertEqual(presenter.formatted_timestamp(), "N/A")
        self.assertEqual(presenter.formatted_eta(), "Arrived")
        self.assertFalse(presenter.can_play())
        self.assertEqual(presenter.full_path(), [])
        self.assertEqual(presenter.total_points(), 0)
        self.assertEqual(presenter.current_point_number(), 0)

    def test_speed_between_two_points(self):
        """Test speed over a 0.1539 km hop in one minute"""
        presenter = self._presenter([RoutePoint(17.0, 78.0, 0), RoutePoint(17.001, 78.001, 60000)])
        self._advance_to(1)
        self.assertEqual(presenter.formatted_speed(), "9.23 km/h")
        self.assertEqual(presenter.formatted_eta(), "Arrived")
        self.assertEqual(presenter.progress_percent(), 100)

    def test_equal_timestamps_render_na(self):
        """Test a zero-duration segment renders N/A"""
        presenter = self._presenter([RoutePoint(17.0, 78.0, 1000), RoutePoint(17.001, 78.001, 1000)])
        self._advance_to(1)
        self.assertEqual(presenter.formatted_speed(), "N/A")

    def test_progress_is_monotonic(self):
        """Test progress climbs from 0 to 100 as the cursor advances"""
        route = [RoutePoint(0, i * 0.01, i * 60000) for i in range(8)]
        presenter = self._presenter(route)
        self.controller.play()
        values = [presenter.progress_percent()]
        for _ in range(7):
            self.controller.tick()
            values.append(presenter.progress_percent())
        self.assertEqual(values[0], 0)
        self.assertEqual(values[-1], 100)
        self.assertEqual(values, sorted(values))
        self.assertEqual(values[3], 42.9)

    def test_formatted_fields(self):
        """Test the status panel fields at the first point"""
        route = [RoutePoint(17.385544, 78.487471, 1721469600000), RoutePoint(17.3856, 78.4875, 1721469660000)]
        presenter = self._presenter(route)
        self.assertEqual(presenter.formatted_coordinates(), "17.385544, 78.487471")
        self.assertEqual(presenter.formatted_timestamp(), "10:00:00")
        self.assertEqual(presenter.formatted_eta(), "1 min")
        self.assertEqual(presenter.formatted_progress(), "0.0%")
        self.assertEqual(presenter.total_points(), 2)
        self.assertEqual(presenter.current_point_number(), 1)
        self.assertTrue(presenter.can_play())

    def test_simulation_multiplier(self):
        """Test the playback rate is shown relative to the 2000ms default"""
        presenter = self._presenter([])
        self.assertEqual(presenter.simulation_multiplier(), "1.0x")
        self.controller.set_speed(500)
        self.assertEqual(presenter.simulation_multiplier(), "4.0x")
        self.controller.set_speed(3000)
        self.assertEqual(presenter.simulation_multiplier(), "0.7x")

    def test_paths(self):
        """Test the full and traveled paths as (lat, lng) pairs"""
        route = [RoutePoint(0, i, i * 1000) for i in range(4)]
        presenter = self._presenter(route)
        self._advance_to(2)
        self.assertEqual(presenter.full_path(), [(0, 0), (0, 1), (0, 2), (0, 3)])
        self.assertEqual(presenter.traveled_path(), [(0, 0), (0, 1), (0, 2)])

    def test_view_model(self):
        """Test the view-model snapshot handed to rendering collaborators"""
        route = [RoutePoint(0, i, i * 60000) for i in range(3)]
        presenter = self._presenter(route)
        self._advance_to(1)
        model = presenter.view_model()
        self.assertEqual(model['current_index'], 1)
        self.assertEqual(model['current_point'], route[1])
        self.assertTrue(model['is_playing'])
        self.assertEqual(model['route'], tuple(route))
        self.assertEqual(model['derived_metrics']['eta'], "1 min")
        self.assertEqual(model['derived_metrics']['progress'], 50.0)
        self.assertTrue(model['derived_metrics']['speed'].endswith("km/h"))

    def test_status_line(self):
        """Test the one-line status summary"""
        presenter = self._presenter([RoutePoint(0, 0, 0), RoutePoint(0, 1, 3600000)])
        line = presenter.status_line()
        self.assertIn("[1/2]", line)
        self.assertIn("ETA 1h 0m", line)

if __name__ == '__main__':
    unittest.main()
