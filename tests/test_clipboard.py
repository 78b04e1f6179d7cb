import json

from clipboard import COPY_FAILED, COPY_LABEL, COPY_SUCCESS, copy_snippet


def test_snippet_embeds_text_as_json():
    text = 'Hola,\n"Sync" </script><b>'
    html = copy_snippet(text)
    assert json.dumps(text).replace("</", "<\\/") in html
    assert "</script><b>" not in html.split("<script>", 1)[1].split("</script>", 1)[0]


def test_copy_runs_from_button_inside_component():
    html = copy_snippet("x")
    assert f'<button id="copy-button" type="button">{COPY_LABEL}</button>' in html
    listener = html.split('addEventListener("click"', 1)[1]
    assert "navigator.clipboard.writeText" in listener
    assert "fallback()" in listener


def test_fallback_checks_exec_command_result():
    html = copy_snippet("x")
    assert 'copied = document.execCommand("copy");' in html
    assert 'if (copied) {\n            flash("copy-success");' in html
    assert COPY_SUCCESS in html
    assert COPY_FAILED in html


def test_snippet_confirmation_timeout():
    assert "}, 1500);" in copy_snippet("x", timeout_ms=1500)
    assert "}, 3000);" in copy_snippet("x")
