from models import Edge
from store import ResultStore

NETWORK = [Edge(from_="A", to="T", capacity=4)]


def record(store, player_id, name, correct, ff=1.0, ek=2.0):
    return store.add(player_id=player_id, player_name=name, network=NETWORK,
                     player_answer=4 if correct else 1, correct_answer=4, is_correct=correct,
                     ford_fulkerson_time=ff, edmonds_karp_time=ek)


def test_ids_increment():
    store = ResultStore()
    assert [record(store, 1, "alice", True).id for _ in range(3)] == [1, 2, 3]


def test_history_newest_first_and_filtered():
    store = ResultStore()
    first = record(store, 1, "alice", True)
    record(store, 2, "bob", False)
    last = record(store, 1, "alice", False)
    history = store.history(1)
    assert [r.id for r in history] == [last.id, first.id]
    assert store.history(99) == []


def test_results_limit():
    store = ResultStore()
    for _ in range(5):
        record(store, 1, "alice", True)
    results = store.results(limit=3)
    assert [r.id for r in results] == [5, 4, 3]


def test_leaderboard_aggregates():
    store = ResultStore()
    record(store, 1, "alice", True, ff=1.0, ek=3.0)
    record(store, 1, "alice", False, ff=3.0, ek=5.0)
    record(store, 2, "bob", True)
    record(store, 2, "bob", True)
    record(store, 3, "carol", False)

    board = store.leaderboard()
    assert [e.player_name for e in board] == ["bob", "alice", "carol"]
    alice = board[1]
    assert alice.total_games == 2
    assert alice.correct_answers == 1
    assert alice.avg_ford_fulkerson_time == 2.0
    assert alice.avg_edmonds_karp_time == 4.0


def test_leaderboard_limit_and_ties():
    store = ResultStore()
    for pid in (5, 3, 4):
        record(store, pid, f"player{pid}", True)
    board = store.leaderboard(limit=2)
    assert [e.player_id for e in board] == [3, 4]
