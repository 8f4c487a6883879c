"""API tests through FastAPI's TestClient."""


def lookup(client, words, from_lang="pli", to_lang="en"):
    return client.post("/lookup", json={"words": words, "from": from_lang, "to": to_lang})


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["dictionaries"] == 3


def test_dictionaries(client):
    response = client.get("/dictionaries")
    assert response.status_code == 200
    assert response.json() == {
        "dictionaries": [
            {"from": "lzh", "to": "en"},
            {"from": "pli", "to": "en"},
            {"from": "pli", "to": "nl"},
        ],
        "inflections": False,
        "decompositions": False,
    }


class TestPaliLookup:

    def test_exact(self, client):
        response = lookup(client, ["buddha"])
        assert response.status_code == 200
        assert response.json() == {
            "buddha": [{"base": "buddha", "entry": {"d": "the awakened one", "g": "masc"}}],
        }

    def test_inflected(self, client):
        data = lookup(client, ["buddhassa"]).json()
        assert [m["base"] for m in data["buddhassa"]] == ["buddha"]

    def test_compound(self, client):
        data = lookup(client, ["dhammavinaya"]).json()
        assert [m["base"] for m in data["dhammavinaya"]] == ["dhamma", "vinaya"]
        assert data["dhammavinaya"][0]["entry"] == {"d": ["teaching", "nature"]}

    def test_unresolved_remainder(self, client):
        data = lookup(client, ["dhammaxyz"]).json()
        assert data["dhammaxyz"][1] == {"base": "xyz", "meaning": "?"}
        assert "leftover" not in data["dhammaxyz"][0]

    def test_unmatched_words_omitted(self, client):
        data = lookup(client, ["buddha", "qqqq"]).json()
        assert list(data) == ["buddha"]

    def test_keys_are_original_words(self, client):
        data = lookup(client, ["Buddha,"]).json()
        assert list(data) == ["Buddha,"]

    def test_fallback_dictionary(self, client):
        data = lookup(client, ["sutta", "dhamma"], to_lang="nl").json()
        assert data["sutta"] == [{"base": "sutta", "entry": {"d": "tekst"}}]
        assert data["dhamma"] == [{"base": "dhamma", "entry": {"d": ["teaching", "nature"]}}]

    def test_missing_dictionary(self, client):
        response = lookup(client, ["dhamma"], to_lang="es")
        assert response.status_code == 404

    def test_list_shaped_dictionary(self, client, data_dir):
        (data_dir / "lookup-pli-es.json").write_text('[["buddha", "x"]]', encoding="utf-8")
        response = lookup(client, ["buddha"], to_lang="es")
        assert response.status_code == 503

    def test_entry_without_definition(self, client, data_dir):
        (data_dir / "lookup-pli-pt.json").write_text(
            '{"buddha": {"d": null, "g": "masc"}}', encoding="utf-8"
        )
        response = lookup(client, ["buddha"], to_lang="pt")
        assert response.status_code == 200
        assert response.json() == {"buddha": [{"base": "buddha", "entry": {"g": "masc"}}]}


class TestChineseLookup:

    def test_substrings(self, client):
        response = lookup(client, ["說佛法"], from_lang="lzh")
        assert response.status_code == 200
        assert response.json() == {
            "佛": {"d": "Buddha", "p": "fó"},
            "法": {"d": "dharma", "p": "fǎ"},
        }

    def test_no_match(self, client):
        assert lookup(client, ["如是"], from_lang="lzh").json() == {}


class TestValidation:

    def test_unsupported_source_language(self, client):
        assert lookup(client, ["x"], from_lang="san").status_code == 422

    def test_empty_word_list(self, client):
        assert lookup(client, []).status_code == 422

    def test_bad_target_code(self, client):
        assert lookup(client, ["x"], to_lang="../etc").status_code == 422
