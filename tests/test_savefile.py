"""Tests for the save file format and its file wrappers."""

import pytest

from config import MANUAL, O, X
from engine import HexGame
from errors import InvalidSaveFileError, SaveFileReadError, SaveFileWriteError
from savefile import format_save, load_game, parse_save, save_game

VALID = "1,2,3,4,5\nX.O\n..X\n"


class TestParseSave:
    """Tests for parse_save()."""

    def test_valid_file(self):
        game = parse_save(VALID)

        assert game.x_turn
        assert (game.height, game.width) == (2, 3)
        assert game.players[0].move_counter == 4
        assert game.players[1].move_counter == 5
        assert game.grid.get(0, 0) == X
        assert game.grid.get(0, 2) == O
        assert game.grid.rows() == ["X.O", "..X"]

    def test_player_types_come_from_caller(self):
        game = parse_save(VALID, player_types=(MANUAL, "a"))

        assert game.players[0].is_manual
        assert not game.players[1].is_manual

    def test_missing_final_newline_is_tolerated(self):
        assert parse_save(VALID.rstrip("\n")).grid.rows() == ["X.O", "..X"]

    @pytest.mark.parametrize("text", [
        "",
        "1,2,3,4\nX.O\n..X\n",          # four header tokens
        "1,2,3,4,5,6\nX.O\n..X\n",      # six header tokens
        "2,2,3,4,5\nX.O\n..X\n",        # bad turn
        "1,0,3,4,5\n",                  # zero height
        "1,2,1001,4,5\nX.O\n..X\n",     # width too large
        "1,2,3,-1,5\nX.O\n..X\n",       # negative counter
        "1,2,3,4,x\nX.O\n..X\n",        # non-integer token
        "1,2,3,4,5\nX.O\n..\n",         # short row
        "1,2,3,4,5\nX.O\n..XX\n",       # long row
        "1,2,3,4,5\nX.O\n..Y\n",        # illegal character
        "1,2,3,4,5\nX.O\n",             # missing row
        "1,2,3,4,5\nX.O\n..X\n...\n",   # extra row
        "1,2,3,4,5\r\nX.O\r\n..X\r\n",  # carriage returns
    ])
    def test_invalid_contents(self, text):
        with pytest.raises(InvalidSaveFileError):
            parse_save(text)


class TestFormatSave:
    """Tests for format_save() and round trips through it."""

    def test_format(self):
        game = HexGame(2, 2)
        game.make_move(0, 1)

        assert format_save(game) == "1,2,2,0,0\n.O\n..\n"

    def test_round_trip_after_auto_moves(self):
        game = HexGame(4, 5)
        for _ in range(5):
            game.make_move(*game.generate_auto_move())

        loaded = parse_save(format_save(game))

        assert loaded.x_turn == game.x_turn
        assert (loaded.height, loaded.width) == (game.height, game.width)
        assert [p.move_counter for p in loaded.players] == [p.move_counter for p in game.players]
        assert loaded.grid.rows() == game.grid.rows()


class TestFileWrappers:
    """Tests for load_game() and save_game()."""

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "game.txt"
        game = HexGame(3, 3)
        game.make_move(1, 1)

        save_game(game, str(path))
        loaded = load_game(str(path))

        assert path.read_text() == format_save(game)
        assert loaded.grid.rows() == game.grid.rows()
        assert loaded.x_turn

    def test_missing_file(self, tmp_path):
        with pytest.raises(SaveFileReadError) as exc_info:
            load_game(str(tmp_path / "missing.txt"))

        assert exc_info.value.exit_code == 4

    def test_crlf_file_is_rejected(self, tmp_path):
        path = tmp_path / "crlf.txt"
        path.write_bytes(b"1,2,3,4,5\r\nX.O\r\n..X\r\n")

        with pytest.raises(InvalidSaveFileError):
            load_game(str(path))

    def test_saved_file_uses_plain_newlines(self, tmp_path):
        path = tmp_path / "game.txt"

        save_game(HexGame(1, 2), str(path))

        assert path.read_bytes() == b"0,1,2,0,0\n..\n"

    def test_bad_contents(self, tmp_path):
        path = tmp_path / "bad.txt"
        path.write_text("0,1,1,0\n.\n")

        with pytest.raises(InvalidSaveFileError) as exc_info:
            load_game(str(path))

        assert exc_info.value.exit_code == 5

    def test_save_to_directory_fails(self, tmp_path):
        with pytest.raises(SaveFileWriteError):
            save_game(HexGame(2, 2), str(tmp_path))

    def test_save_without_name_fails(self):
        with pytest.raises(SaveFileWriteError):
            save_game(HexGame(2, 2), "")
