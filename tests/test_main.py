import pytest
from fastapi.testclient import TestClient

from quimica.main import create_app
from quimica.messages import MESSAGES

from conftest import PEROXIDE, PEROXIDE_TEXT


@pytest.mark.parametrize("path", ["/", "/?q="])
def test_invalid_formula(make_api, path):
    api, predictor = make_api(content=PEROXIDE_TEXT)
    res = api.get(path)
    assert res.status_code == 400
    assert res.json() == {"message": "Fórmula inválida."}
    assert predictor.client.completions.calls == []


def test_whitespace_formula_is_forwarded(make_api):
    api, predictor = make_api(content="null")
    res = api.get("/", params={"q": "  "})
    assert res.status_code == 200
    assert res.json() == {"message": "Sem reação."}
    (call,) = predictor.client.completions.calls
    assert call["messages"][1]["content"][0]["text"] == "  "


def test_unknown_locale_rejected_at_startup(settings):
    bad = settings.model_copy(update={"locale": "fr"})
    with pytest.raises(ValueError):
        create_app(settings=bad)


def test_message_responses_documented(make_api):
    api, _ = make_api(content="null")
    responses = api.get("/openapi.json").json()["paths"]["/"]["get"]["responses"]
    assert {"400", "500", "503"} <= set(responses)


def test_reaction(make_api):
    api, predictor = make_api(content=PEROXIDE_TEXT)
    res = api.get("/", params={"q": "H2O+O2"})
    assert res.status_code == 200
    assert res.json() == PEROXIDE
    # the formula goes to the model verbatim
    assert predictor.client.completions.calls[0]["messages"][1]["content"][0]["text"] == "H2O+O2"


def test_partial_result_omits_missing_fields(make_api):
    api, _ = make_api(content="H2O2\nPeróxido de hidrogênio")
    res = api.get("/", params={"q": "H2O+O2"})
    assert res.status_code == 200
    assert res.json() == {"formula": "H2O2", "name": "Peróxido de hidrogênio"}


@pytest.mark.parametrize("content", ["null", ""])
def test_no_reaction(make_api, content):
    api, _ = make_api(content=content)
    res = api.get("/", params={"q": "He+Ne"})
    assert res.status_code == 200
    assert res.json() == {"message": "Sem reação."}


def test_prediction_failure_is_no_reaction_by_default(make_api):
    api, _ = make_api(exc=RuntimeError("connection reset"))
    res = api.get("/", params={"q": "H2O+O2"})
    assert res.status_code == 200
    assert res.json() == {"message": "Sem reação."}


def test_prediction_failure_is_503_when_separated(make_api):
    api, _ = make_api({"separate_unavailable": True}, exc=RuntimeError("connection reset"))
    res = api.get("/", params={"q": "H2O+O2"})
    assert res.status_code == 503
    assert res.json() == {"message": "Serviço de previsão indisponível."}


def test_genuine_no_reaction_stays_200_when_separated(make_api):
    api, _ = make_api({"separate_unavailable": True}, content="null")
    res = api.get("/", params={"q": "He+Ne"})
    assert res.status_code == 200
    assert res.json() == {"message": "Sem reação."}


class ExplodingPredictor:
    def __init__(self, settings):
        self.settings = settings

    def predict_reaction(self, formula):
        raise RuntimeError("outside the prediction guard")


def test_handler_failure_is_500(settings):
    api = TestClient(create_app(predictor=ExplodingPredictor(settings)))
    res = api.get("/", params={"q": "H2O+O2"})
    assert res.status_code == 500
    assert res.json() == {"message": "Falha ao processar reação."}


def test_english_messages(make_api):
    api, _ = make_api({"locale": "en"}, content="null")
    assert api.get("/", params={"q": "He+Ne"}).json() == {"message": MESSAGES["en"]["no_reaction"]}
    assert api.get("/").json() == {"message": MESSAGES["en"]["invalid_formula"]}


def test_healthz(make_api):
    api, _ = make_api(content="null")
    assert api.get("/healthz").json() == {"status": "ok"}
