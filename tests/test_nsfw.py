from chatplugins.nsfw import Prediction, auto_judge, judge


def test_neutral_picture():
    p = Prediction(drawings=0.1, neutral=0.9)
    assert judge(p) == "普通哦"
    assert auto_judge(p) is None


def test_drawing_with_flags():
    p = Prediction(drawings=0.9, hentai=0.5, sexy=0.4)
    assert judge(p) == "二次元 hentai hso"
    assert auto_judge(p) == "二次元 hentai hso"


def test_auto_judge_without_flags_is_silent():
    p = Prediction(drawings=0.9, neutral=0.05)
    assert auto_judge(p) is None
    assert judge(p) == "二次元"


def test_low_neutral_differs_between_judges():
    p = Prediction(drawings=0.1, neutral=0.1, porn=0.8)
    assert judge(p) == "二次元 porn"
    assert auto_judge(p) == "三次元 porn"


def test_neutral_exactly_threshold_real_photo():
    p = Prediction(drawings=0.1, neutral=0.3, porn=0.6)
    assert judge(p) == "三次元 porn"