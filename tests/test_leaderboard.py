import pygame

from yorutris.colors import WHITE
from yorutris.leaderboard import LeaderBoard, ScoreEntry


def test_scores_sorted_highest_first(tmp_path):
    board = LeaderBoard(tmp_path / "scores.txt")
    board.add_score("Player", 100, 1)
    board.add_score("Player", 300, 2)
    board.add_score("Other", 200, 1)
    assert [e.score for e in board.high_scores()] == [300, 200, 100]


def test_duplicate_is_skipped(tmp_path):
    board = LeaderBoard(tmp_path / "scores.txt")
    board.add_score("Player", 100, 1)
    board.add_score("Player", 100, 1)
    assert board.high_scores() == [ScoreEntry("Player", 100, 1)]


def test_same_score_different_level_is_kept(tmp_path):
    board = LeaderBoard(tmp_path / "scores.txt")
    board.add_score("Player", 100, 1)
    board.add_score("Player", 100, 2)
    assert len(board.high_scores()) == 2


def test_equal_scores_keep_insertion_order(tmp_path):
    board = LeaderBoard(tmp_path / "scores.txt")
    board.add_score("a", 50, 1)
    board.add_score("b", 50, 1)
    assert [e.player_name for e in board.high_scores()] == ["a", "b"]


def test_keeps_only_top_ten(tmp_path):
    board = LeaderBoard(tmp_path / "scores.txt")
    for score in range(12):
        board.add_score("p", score, 1)
    scores = [e.score for e in board.high_scores()]
    assert len(scores) == 10
    assert min(scores) == 2


def test_file_format(tmp_path):
    path = tmp_path / "scores.txt"
    board = LeaderBoard(path)
    board.add_score("Player", 100, 1)
    assert path.read_text() == "Player 100 1\n"


def test_round_trip_through_file(tmp_path):
    path = tmp_path / "scores.txt"
    board = LeaderBoard(path)
    board.add_score("Player", 100, 1)
    board.add_score("Other", 700, 3)
    again = LeaderBoard(path)
    assert again.high_scores() == board.high_scores()


def test_missing_file_gives_empty_board(tmp_path):
    board = LeaderBoard(tmp_path / "absent.txt")
    assert board.high_scores() == []


def test_load_stops_at_malformed_entry(tmp_path):
    path = tmp_path / "scores.txt"
    path.write_text("a 1 1\nb x 2\nc 3 3\n")
    board = LeaderBoard(path)
    assert board.high_scores() == [ScoreEntry("a", 1, 1)]


def test_reload_does_not_duplicate(tmp_path):
    path = tmp_path / "scores.txt"
    board = LeaderBoard(path)
    board.add_score("Player", 100, 1)
    board.load()
    assert len(board.high_scores()) == 1


def test_clear_empties_board_and_file(tmp_path):
    path = tmp_path / "scores.txt"
    board = LeaderBoard(path)
    board.add_score("Player", 100, 1)
    board.clear()
    assert board.high_scores() == []
    assert path.read_text() == ""


def test_context_manager_saves(tmp_path):
    path = tmp_path / "scores.txt"
    with LeaderBoard(path) as board:
        board.add_score("Player", 100, 1)
        path.write_text("")
    assert path.read_text() == "Player 100 1\n"


def test_draw_frames_table(tmp_path):
    pygame.font.init()
    board = LeaderBoard(tmp_path / "scores.txt")
    board.add_score("Player", 100, 1)
    surface = pygame.Surface((1000, 1000))
    board.draw(surface, pygame.font.Font(None, 40))
    assert tuple(surface.get_at((102, 300))) == WHITE