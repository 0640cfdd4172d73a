import sys
import os
import logging

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
import saintelague.__main__ as cli


def _rows(output):
    return [line.split() for line in output.strip().splitlines()]


def test_parse_args():
    args = cli.argparser.parse_args(['-n', '8', '-d', '--seed', '3', '3', '3', '1'])
    assert args.votes == [3.0, 3.0, 1.0]
    assert args.n_seats == 8
    assert args.draw_on_tie
    assert args.seed == 3
    assert args.party_names is None


def test_main_numbered(capsys):
    assert cli.main([0.0, 3.0], 50) == 0
    assert _rows(capsys.readouterr().out) == [['1', '0'], ['2', '50']]


def test_main_named(capsys):
    status = cli.main(
        [41.5, 25.7, 8.6, 8.4], 631,
        party_names=['CDU', 'SPD', 'Linke', 'Grüne'],
    )
    assert status == 0
    assert _rows(capsys.readouterr().out) == [
        ['CDU', '311'], ['SPD', '193'], ['Linke', '64'], ['Grüne', '63'],
    ]


def test_main_draw(capsys):
    assert cli.main([3.0, 3.0, 1.0], 8, draw_on_tie=True, seed=1711) == 0
    seats = [int(row[1]) for row in _rows(capsys.readouterr().out)]
    assert seats in ([4, 3, 1], [3, 4, 1])


def test_main_tied(capsys, caplog):
    with caplog.at_level(logging.ERROR):
        assert cli.main([3.0, 3.0, 1.0], 8) == 1
    assert capsys.readouterr().out == ''
    assert any(
        record.levelno == logging.ERROR and 'Tie' in record.getMessage()
        for record in caplog.records
    )


def test_main_invalid_seats(caplog):
    with caplog.at_level(logging.ERROR):
        assert cli.main([3.0], 0) == 1
    assert any('seat count' in record.getMessage() for record in caplog.records)


def test_main_name_count_mismatch():
    with pytest.raises(SystemExit):
        cli.main([1.0, 2.0], 5, party_names=['A'])


def test_main_duplicate_names():
    with pytest.raises(SystemExit):
        cli.main([1.0, 2.0], 5, party_names=['A', 'A'])


def test_show_distribution(capsys):
    cli.show_distribution({'Long name': 3, 'B': 12})
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith('Long name')
    assert lines[1].startswith('B        ')
    assert lines[1].endswith('12')
