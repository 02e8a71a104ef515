import pytest

from wordle_duel.config import GameSettings, WORD_LIST, find_duplicate_words
from wordle_duel.errors import InvalidConfigError


def test_default_word_list_is_valid():
    assert WORD_LIST
    assert all(len(word) == 5 and word.isalpha() and word.isupper() for word in WORD_LIST)
    assert find_duplicate_words(WORD_LIST) == []
    assert GameSettings().snapshot().words == tuple(WORD_LIST)


def test_update_normalizes_words():
    settings = GameSettings()
    snapshot = settings.update(max_rounds=4, word_list=['crane', 'Stone'])
    assert snapshot.max_rounds == 4
    assert snapshot.words == ('CRANE', 'STONE')
    assert settings.to_dict() == {'max_rounds': 4, 'word_list_size': 2}


@pytest.mark.parametrize('kwargs', [
    {'max_rounds': 0},
    {'max_rounds': -3},
    {'max_rounds': '6'},
    {'max_rounds': True},
    {'word_list': []},
    {'word_list': 'CRANE'},
    {'word_list': ['CRANE', 'KITE']},
    {'word_list': ['CRANE', 'CR4NE']},
    {'max_rounds': 3, 'word_list': ['CRANE', 12345]},
])
def test_invalid_update_changes_nothing(kwargs):
    settings = GameSettings(max_rounds=6, word_list=['CRANE'])
    with pytest.raises(InvalidConfigError):
        settings.update(**kwargs)
    assert settings.snapshot() == (6, ('CRANE',))


def test_duplicates_are_kept_as_independent_entries():
    settings = GameSettings(word_list=['STONE', 'crane', 'CRANE', 'STONE', 'PIANO'])
    assert len(settings.word_list) == 5
    assert find_duplicate_words(settings.word_list) == ['CRANE', 'STONE']


def test_duplicate_words_are_reported_on_config_update(client, caplog):
    with caplog.at_level('WARNING', logger='wordle_duel'):
        res = client.post('/api/config', json={'word_list': ['CRANE', 'crane', 'PIANO']})
    assert res.status_code == 200
    assert res.get_json()['word_list_size'] == 3
    assert "repeats 1 words: ['CRANE']" in caplog.text
