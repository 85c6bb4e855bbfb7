"""Unit tests for ReportService aggregations."""

from datetime import datetime, timedelta

from bson import ObjectId

from core.constants import TRENDING_WINDOW_DAYS
from core.enums import SortOrder
from core.exceptions import (
    CountyNotFoundError,
    InvalidInputError,
    UserNotFoundError,
)
from core.services.report_service import ReportService
from tests.base import BaseUnitTest
from tests.factories import make_event, make_review, make_user


def _id(document):
    return str(document["_id"])


def _ids(events):
    return [event.id for event in events]


class ReportServiceTestCase(BaseUnitTest):
    def setUp(self):
        super().setUp()
        self.service = ReportService()
        self.first, self.second, self.third = self.seed_events(
            make_event(county="York"),
            make_event(county="YORK"),
            make_event(county="Cork"),
        )

    def seed_ratings(self, ratings_by_user):
        """Seed users 1..n, each rating events given as (event, rating) pairs."""
        self.seed_users(
            *(
                make_user(
                    user_id,
                    reviews=[
                        make_review(event["_id"], rating) for event, rating in pairs
                    ],
                )
                for user_id, pairs in enumerate(ratings_by_user, start=1)
            )
        )


class TestTopRatedEvents(ReportServiceTestCase):
    def test_orders_by_average_and_excludes_unreviewed_events(self):
        self.seed_ratings(
            [
                [(self.first, 5), (self.second, 3)],
                [(self.first, 4), (self.second, 2)],
            ]
        )

        events = self.service.top_rated_events()

        self.assertEqual(_ids(events), [_id(self.first), _id(self.second)])
        self.assertEqual(events[0].average_score, 4.5)
        self.assertEqual(events[0].reviews_count, 2)
        self.assertEqual(events[1].average_score, 2.5)

    def test_rounds_average_to_two_decimals(self):
        self.seed_ratings([[(self.first, 5)], [(self.first, 4)], [(self.first, 4)]])

        events = self.service.top_rated_events()

        self.assertEqual(events[0].average_score, 4.33)

    def test_ties_go_to_more_reviews(self):
        self.seed_ratings(
            [
                [(self.first, 4), (self.second, 4)],
                [(self.second, 4)],
            ]
        )

        events = self.service.top_rated_events()

        self.assertEqual(events[0].id, str(self.second["_id"]))

    def test_limit(self):
        self.seed_ratings([[(self.first, 1), (self.second, 2), (self.third, 3)]])

        events = self.service.top_rated_events(limit=2)

        self.assertEqual(_ids(events), [_id(self.third), _id(self.second)])

    def test_reviews_of_deleted_events_are_ignored(self):
        self.seed_users(make_user(1, reviews=[make_review(ObjectId(), 5)]))

        self.assertEqual(self.service.top_rated_events(), [])

    def test_repeated_calls_return_the_same_result(self):
        self.seed_ratings([[(self.first, 3), (self.second, 5)]])

        first_run = self.service.top_rated_events()

        self.assertEqual(self.service.top_rated_events(), first_run)


class TestEventsByReviewCount(ReportServiceTestCase):
    def setUp(self):
        super().setUp()
        self.seed_ratings(
            [
                [(self.first, 1), (self.second, 2)],
                [(self.first, 3)],
                [(self.first, 4)],
            ]
        )

    def test_descending(self):
        events = self.service.events_by_review_count(SortOrder.DESC)

        self.assertEqual([e.reviews_count for e in events], [3, 1])
        self.assertEqual(events[0].id, str(self.first["_id"]))

    def test_ascending(self):
        events = self.service.events_by_review_count(SortOrder.ASC)

        self.assertEqual([e.reviews_count for e in events], [1, 3])


class TestFiveStarAndTrendingEvents(ReportServiceTestCase):
    def test_five_star_counts_only_exact_fives(self):
        self.seed_ratings(
            [
                [(self.first, 5), (self.second, 5)],
                [(self.first, 5), (self.third, 4.5)],
            ]
        )

        events = self.service.five_star_events()

        self.assertEqual(
            [(e.id, e.five_stars_count) for e in events],
            [(str(self.first["_id"]), 2), (str(self.second["_id"]), 1)],
        )

    def test_trending_counts_reviews_inside_window(self):
        now = datetime(2024, 6, 30, 12, 0)
        recent = now - timedelta(days=3)
        stale = now - timedelta(days=45)
        self.seed_users(
            make_user(
                1,
                reviews=[
                    make_review(self.first["_id"], 4, recent),
                    make_review(self.second["_id"], 4, stale),
                    make_review(self.third["_id"], 4),
                ],
            ),
            make_user(2, reviews=[make_review(self.first["_id"], 2, recent)]),
        )

        events = self.service.trending_events(now=now)

        self.assertEqual(
            [(e.id, e.recent_review_count) for e in events],
            [(str(self.first["_id"]), 2)],
        )

    def test_trending_window_start_is_inclusive(self):
        now = datetime(2024, 6, 30, 12, 0)
        window_start = now - timedelta(days=TRENDING_WINDOW_DAYS)
        self.seed_users(
            make_user(
                1,
                reviews=[
                    make_review(self.first["_id"], 4, window_start),
                    make_review(
                        self.second["_id"], 4, window_start - timedelta(seconds=1)
                    ),
                ],
            )
        )

        events = self.service.trending_events(now=now)

        self.assertEqual(_ids(events), [_id(self.first)])


class TestCountyRollup(ReportServiceTestCase):
    def test_matches_county_case_insensitively(self):
        self.seed_ratings([[(self.first, 5), (self.second, 2)], [(self.first, 4)]])

        rollup = self.service.county_rollup(" york ")

        self.assertEqual(rollup.county, "york")
        self.assertEqual(rollup.total_events, 2)
        self.assertEqual(
            {e.id for e in rollup.events},
            {str(self.first["_id"]), str(self.second["_id"])},
        )
        # mean of 4.5 and 2.0
        self.assertEqual(rollup.county_average, 3.25)

    def test_unreviewed_events_are_listed_without_score(self):
        rollup = self.service.county_rollup("Cork")

        self.assertEqual(rollup.total_events, 1)
        self.assertIsNone(rollup.county_average)
        self.assertIsNone(rollup.events[0].average_score)
        self.assertEqual(rollup.events[0].reviews_count, 0)

    def test_unknown_county_raises_not_found(self):
        with self.assertRaises(CountyNotFoundError):
            self.service.county_rollup("Leitrim")

    def test_blank_county_is_invalid(self):
        with self.assertRaises(InvalidInputError):
            self.service.county_rollup("   ")


class TestYearReports(ReportServiceTestCase):
    def setUp(self):
        super().setUp()
        self.seed_users(
            make_user(
                1,
                reviews=[
                    make_review(self.first["_id"], 4, datetime(2024, 1, 1)),
                    make_review(self.second["_id"], 4, datetime(2024, 12, 31, 23, 59)),
                ],
            ),
            make_user(
                2, reviews=[make_review(self.third["_id"], 4, datetime(2023, 12, 31))]
            ),
            make_user(3, reviews=[make_review(self.third["_id"], 4)]),
        )

    def test_active_users_in_year(self):
        report = self.service.active_users_in_year(2024)

        self.assertEqual(report.year, 2024)
        self.assertEqual(report.active_user_count, 1)
        self.assertEqual(report.active_users[0].id, 1)

    def test_no_active_users(self):
        report = self.service.active_users_in_year(2022)

        self.assertEqual(report.active_user_count, 0)
        self.assertEqual(report.active_users, [])

    def test_events_reviewed_in_year(self):
        events_2024 = self.service.events_reviewed_in_year(2024)
        events_2023 = self.service.events_reviewed_in_year(2023)

        self.assertEqual(
            {e.id for e in events_2024.events},
            {str(self.first["_id"]), str(self.second["_id"])},
        )
        self.assertEqual([e.id for e in events_2023.events], [str(self.third["_id"])])


class TestUserTopEvents(ReportServiceTestCase):
    def test_returns_three_highest_rated_events(self):
        fourth = make_event()
        self.seed_events(fourth)
        self.seed_users(
            make_user(
                1,
                reviews=[
                    make_review(self.first["_id"], 2),
                    make_review(self.second["_id"], 5),
                    make_review(self.third["_id"], 3),
                    make_review(fourth["_id"], 4),
                ],
            )
        )

        result = self.service.user_top_events(1)

        self.assertEqual(result.user.id, 1)
        self.assertEqual(
            [e.id for e in result.best_rated_events],
            [str(self.second["_id"]), str(fourth["_id"]), str(self.third["_id"])],
        )

    def test_ties_go_to_latest_review(self):
        self.seed_users(
            make_user(
                1,
                reviews=[
                    make_review(self.first["_id"], 4),
                    make_review(self.second["_id"], 4, datetime(2024, 1, 1)),
                    make_review(self.third["_id"], 4, datetime(2024, 5, 1)),
                ],
            )
        )

        result = self.service.user_top_events(1)

        self.assertEqual(
            [e.id for e in result.best_rated_events],
            [str(self.third["_id"]), str(self.second["_id"]), str(self.first["_id"])],
        )

    def test_skips_deleted_events(self):
        self.seed_users(
            make_user(
                1,
                reviews=[make_review(ObjectId(), 5), make_review(self.first["_id"], 1)],
            )
        )

        result = self.service.user_top_events(1)

        self.assertEqual(_ids(result.best_rated_events), [_id(self.first)])

    def test_user_without_reviews(self):
        self.seed_users(make_user(1))

        self.assertEqual(self.service.user_top_events(1).best_rated_events, [])

    def test_missing_user_raises(self):
        with self.assertRaises(UserNotFoundError):
            self.service.user_top_events(99)


class TestEventStats(ReportServiceTestCase):
    def test_average_and_count(self):
        self.seed_ratings([[(self.first, 5)], [(self.first, 3)], [(self.first, 4)]])

        stats = self.service.event_stats(self.first["_id"])

        self.assertEqual(stats.avg, 4.0)
        self.assertEqual(stats.count, 3)

    def test_event_without_reviews(self):
        stats = self.service.event_stats(self.first["_id"])

        self.assertIsNone(stats.avg)
        self.assertEqual(stats.count, 0)
