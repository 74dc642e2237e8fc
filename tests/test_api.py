import pytest
from fastapi.testclient import TestClient

from spellcheck.api import main
from spellcheck.data.loader import DictionaryCache, FileWordRepository, InMemoryWordRepository
from spellcheck.spelling.service import PermutationSpellCheckService, SpellCheckResult, SpellCheckService


class FakeService(SpellCheckService):
    def check_spelling(self, word):
        if word == "ok":
            return SpellCheckResult(True)
        return SpellCheckResult(False, frozenset({"zeta", "alpha"}))


def make_client(service):
    return TestClient(main.create_app(service=service))


@pytest.fixture(scope="module")
def client():
    cache = DictionaryCache(InMemoryWordRepository({"balloon", "hello", "cat"}))
    return make_client(PermutationSpellCheckService(cache, max_word_length=20))


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "message" in response.json()


def test_correct_word(client):
    response = client.get("/spelling/balloon")
    assert response.status_code == 200
    assert response.json() == {"word": "balloon", "correct": True, "suggestions": []}


def test_misspelled_word(client):
    response = client.get("/spelling/ballloooon")
    assert response.status_code == 200
    assert response.json() == {"word": "ballloooon", "correct": False, "suggestions": ["balloon"]}


def test_mixed_case_word(client):
    data = client.get("/spelling/HeLLo").json()
    assert data["correct"] is False
    assert data["suggestions"] == ["hello"]


def test_no_suggestions(client):
    data = client.get("/spelling/xyz").json()
    assert data == {"word": "xyz", "correct": False, "suggestions": []}


def test_suggestions_sorted():
    client = make_client(FakeService())
    assert client.get("/spelling/nope").json()["suggestions"] == ["alpha", "zeta"]
    assert client.get("/spelling/ok").json()["correct"] is True


def test_dictionary_unavailable_is_503(tmp_path):
    cache = DictionaryCache(FileWordRepository(tmp_path / "missing.txt"))
    client = make_client(PermutationSpellCheckService(cache))

    response = client.get("/spelling/hello")
    assert response.status_code == 503
    assert "missing.txt" in response.json()["detail"]


def test_search_space_exceeded_is_422():
    cache = DictionaryCache(InMemoryWordRepository({"cat"}))
    client = make_client(PermutationSpellCheckService(cache, max_word_length=3))

    response = client.get("/spelling/abcdefgh")
    assert response.status_code == 422
    assert "detail" in response.json()
