import unittest
from unittest.mock import MagicMock
from vehicle_playback.session import PlaybackSession, SessionStatus, LOAD_ERROR_MESSAGE
from vehicle_playback.exceptions import DataLoadError
from vehicle_playback.interfaces import RoutePoint

from test_playback import FakeLoop

ROUTE = (RoutePoint(0, 0, 0), RoutePoint(0, 1, 60000), RoutePoint(0, 2, 120000))

class TestPlaybackSession(unittest.TestCase):
    def setUp(self):
        self.loader = MagicMock()
        self.loop = FakeLoop()

    def test_initial_status(self):
        """Test a new session is loading with no controller"""
        session = PlaybackSession(self.loader, 'route.json', loop=self.loop)
        self.assertEqual(session.status, SessionStatus.LOADING)
        self.assertIsNone(session.controller)

    def test_successful_load(self):
        """Test a successful load builds a controller and presenter"""
        self.loader.load_data.return_value = ROUTE
        session = PlaybackSession(self.loader, 'route.json', loop=self.loop, interval_ms=1000)
        self.assertTrue(session.load())
        self.assertTrue(session.is_ready)
        self.assertFalse(session.is_empty)
        self.assertIsNone(session.error)
        self.assertEqual(session.controller.route, ROUTE)
        self.assertEqual(session.controller.interval_ms, 1000)
        self.assertEqual(session.presenter.total_points(), 3)
        self.loader.load_data.assert_called_once_with('route.json')

    def test_failed_load_surfaces_error(self):
        """Test a loader failure sets the error state without retrying"""
        self.loader.load_data.side_effect = DataLoadError("boom", 'route.json')
        session = PlaybackSession(self.loader, 'route.json', loop=self.loop)
        self.assertFalse(session.load())
        self.assertEqual(session.status, SessionStatus.ERROR)
        self.assertEqual(session.error, LOAD_ERROR_MESSAGE)
        self.assertIsNone(session.controller)
        self.assertEqual(self.loader.load_data.call_count, 1)

    def test_retry_after_failure(self):
        """Test a manual retry loads the route once the source recovers"""
        self.loader.load_data.side_effect = [DataLoadError("boom"), ROUTE]
        session = PlaybackSession(self.loader, 'route.json', loop=self.loop)
        self.assertFalse(session.load())
        self.assertTrue(session.retry())
        self.assertTrue(session.is_ready)
        self.assertIsNone(session.error)
        self.assertEqual(self.loader.load_data.call_count, 2)

    def test_retry_closes_previous_controller(self):
        """Test retry stops the previous controller's playback"""
        self.loader.load_data.return_value = ROUTE
        session = PlaybackSession(self.loader, 'route.json', loop=self.loop)
        session.load()
        first = session.controller
        first.play()
        self.assertEqual(len(self.loop.pending()), 1)
        session.retry()
        self.assertFalse(first.is_playing)
        self.assertEqual(self.loop.pending(), [])
        self.assertIsNot(session.controller, first)

    def test_reload_closes_playing_controller(self):
        """Test loading again leaves no tick from the replaced controller"""
        self.loader.load_data.return_value = ROUTE
        session = PlaybackSession(self.loader, 'route.json', loop=self.loop)
        session.load()
        first = session.controller
        first.play()
        session.load()
        self.assertFalse(first.is_playing)
        self.assertEqual(self.loop.pending(), [])
        self.loop.advance(10.0)
        self.assertEqual(first.cursor, 0)

    def test_failed_reload_closes_previous_controller(self):
        """Test a failed reload does not leave the old controller ticking"""
        self.loader.load_data.side_effect = [ROUTE, DataLoadError("boom")]
        session = PlaybackSession(self.loader, 'route.json', loop=self.loop)
        session.load()
        session.controller.play()
        self.assertFalse(session.load())
        self.assertIsNone(session.controller)
        self.assertEqual(self.loop.pending(), [])

    def test_empty_route(self):
        """Test an empty route is ready but flagged as empty"""
        self.loader.load_data.return_value = ()
        session = PlaybackSession(self.loader, 'route.json', loop=self.loop)
        self.assertTrue(session.load())
        self.assertTrue(session.is_empty)
        self.assertIsNone(session.presenter.current_point())

if __name__ == '__main__':
    unittest.main()
