# =============================================================================
# TESTS - Serialized transactions across independent services
# =============================================================================

import threading

import pytest

from quiz_state.db import Database
from quiz_state.services.quiz import QuizService
from tests.factories import ALICE, ctx

WORKERS = 4
CALLS_PER_WORKER = 15


@pytest.fixture
def services(tmp_path, test_settings):
    """Several services, each with its own engine, sharing one SQLite file."""
    url = f"sqlite:///{tmp_path / 'shared.db'}"
    databases = []
    for _ in range(WORKERS):
        database = Database()
        database.init(url)
        databases.append(database)
    yield [QuizService(database, test_settings) for database in databases]
    for database in databases:
        database.dispose()


def run_workers(services, call):
    """Run call(service) CALLS_PER_WORKER times per service, all services at once."""
    barrier = threading.Barrier(len(services))
    results, errors = [], []
    lock = threading.Lock()

    def worker(service):
        barrier.wait()
        for _ in range(CALLS_PER_WORKER):
            try:
                result = call(service)
            except Exception as e:
                with lock:
                    errors.append(f"{type(e).__name__}: {e}")
            else:
                with lock:
                    results.append(result)

    threads = [threading.Thread(target=worker, args=(service,)) for service in services]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return results, errors


class TestConcurrentCreation:
    """Quiz creation from independent services on one store."""

    def test_ids_are_unique_and_nothing_is_lost(self, services, details, questions, no_rewards):
        def create(service):
            return service.create_quiz(ctx(), details, questions, no_rewards, 30, 1000, False, ALICE).id

        ids, errors = run_workers(services, create)
        reader = services[0]
        total = WORKERS * CALLS_PER_WORKER

        assert errors == []
        assert len(ids) == total
        assert len(set(ids)) == total
        assert sorted(ids) == list(range(1, total + 1))
        assert reader.current_quiz_id() == total
        assert reader.get_creator_stats(ALICE).total_quizzes_created == total
        assert sorted(e.quiz_id for e in reader.list_events()) == sorted(ids)
        assert all(reader.get_quiz(quiz_id).creator == ALICE for quiz_id in ids)

    def test_stats_updates_are_not_lost(self, services):
        def host(service):
            return service.update_creator_stats(ctx(), "game_hosted")

        results, errors = run_workers(services, host)
        stats = services[0].get_creator_stats(ALICE)

        assert errors == []
        assert len(results) == WORKERS * CALLS_PER_WORKER
        assert stats.total_games_hosted == WORKERS * CALLS_PER_WORKER
        assert stats.total_quizzes_created == 0
