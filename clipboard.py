import json

COPY_LABEL = '📋 Copiar mensaje'
COPY_SUCCESS = '✅ ¡Mensaje copiado al portapapeles!'
COPY_FAILED = '⚠️ No se pudo copiar automáticamente. Selecciona el texto de abajo y cópialo manualmente.'

SNIPPET = '''
<button id="copy-button" type="button">{label}</button>
<div id="copy-success" style="display:none; background-color:rgba(33,195,84,0.2); padding: 12px; border-radius: 8px;">
    {success}
</div>
<div id="copy-failed" style="display:none; background-color:rgba(255,43,43,0.2); padding: 12px; border-radius: 8px;">
    {failed}
</div>
<textarea id="copy-fallback" style="position:absolute; left:-9999px;" readonly></textarea>
<script>
(function() {{
    const text = {text};
    const area = document.getElementById("copy-fallback");
    function flash(id) {{
        const banner = document.getElementById(id);
        banner.style.display = "block";
        setTimeout(function() {{ banner.style.display = "none"; }}, {timeout_ms});
    }}
    function fallback() {{
        area.value = text;
        area.select();
        let copied = false;
        try {{
            copied = document.execCommand("copy");
        }} catch (err) {{
            copied = false;
        }}
        if (copied) {{
            flash("copy-success");
        }} else {{
            area.style.position = "static";
            area.style.width = "100%";
            area.select();
            document.getElementById("copy-failed").style.display = "block";
        }}
    }}
    document.getElementById("copy-button").addEventListener("click", function() {{
        if (navigator.clipboard && navigator.clipboard.writeText) {{
            navigator.clipboard.writeText(text).then(function() {{ flash("copy-success"); }}, fallback);
        }} else {{
            fallback();
        }}
    }});
}})();
</script>
'''

def copy_snippet(text, timeout_ms=3000, label=COPY_LABEL, success=COPY_SUCCESS, failed=COPY_FAILED):
    """HTML component with a Copy button that copies `text`.

    The click happens inside the component, so both the async clipboard API
    and the execCommand fallback run under the user's gesture. The success
    banner only shows when one of them reports the copy; otherwise the text is
    revealed for a manual copy.
    """
    literal = json.dumps(text).replace('</', '<\\/')
    return SNIPPET.format(text=literal, timeout_ms=int(timeout_ms), label=label, success=success, failed=failed)
