from __future__ import annotations
import argparse
import logging
import time
from datetime import datetime

from flask import Flask, Response, current_app, jsonify, request

from anagrams import Engine, AnagramError, StorageError
from anagrams.config import DEFAULT_DSN, DEFAULT_WORDS_PATH, HOST, PORT
from anagrams.stats import elapsed_microseconds
from anagrams.validate import parse_date_range, validate_word

log = logging.getLogger(__name__)


def _engine() -> Engine:
    return current_app.extensions["anagrams"]


def create_app(engine: Engine) -> Flask:
    """Flask app serving ``engine``; the caller owns the engine's lifecycle."""
    app = Flask(__name__)
    app.extensions["anagrams"] = engine

    @app.errorhandler(AnagramError)
    def _anagram_error(exc: AnagramError):
        if isinstance(exc, StorageError):
            log.warning("Request failed on storage: %s (cause: %r)", exc.message, exc.cause)
        return jsonify(exc.to_dict()), 400

    # ---------- API ----------
    @app.get("/api/v1/similar")
    def api_similar():
        t0 = time.perf_counter()
        observed_at = datetime.now()
        word = validate_word(request.args.get("word"))
        eng = _engine()
        similar = eng.similar(word)
        eng.record(elapsed_microseconds(t0), observed_at)
        return jsonify({"similar": similar})

    @app.post("/api/v1/add-word")
    def api_add_word():
        body = request.get_json(silent=True)
        word = validate_word(body.get("word") if isinstance(body, dict) else None)
        _engine().add_word(word)
        return Response(f"{word} added to the dictionary successfully!", mimetype="text/plain")

    @app.get("/api/v1/stats")
    def api_stats():
        start, end = parse_date_range(request.args.get("from"), request.args.get("to"))
        return jsonify(_engine().statistics(start, end).to_json())

    @app.get("/health")
    def health():
        return jsonify({"ok": True, "totalWords": _engine().dictionary_size()})

    # ---------- UI ----------
    @app.get("/")
    def home():
        return Response(_HOME_HTML, mimetype="text/html")

    return app


# A tiny page: find similar words, add a word, show stats. No external deps.
_HOME_HTML = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Anagram dictionary</title>
<style>
:root{ --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6; --accent:#6ee7ff; --border:#1c2530; --danger:#ff5d5d; --ok:#45d483; }
*{box-sizing:border-box}
body{ margin:0; background:var(--bg); color:var(--ink); font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Arial; }
.container{ max-width:720px; margin:24px auto; padding:0 16px; }
.card{ background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px; }
h1{ font-size:20px; margin:0 0 12px 0 }
input{ width:100%; padding:12px 14px; border-radius:12px; border:1px solid var(--border); background:#0b1117; color:var(--ink); font-size:16px; outline:none; }
input.bad{ border-color:var(--danger) }
.controls{ display:flex; gap:10px; margin:12px 0; flex-wrap:wrap }
.btn{ padding:10px 14px; border-radius:10px; border:1px solid var(--border); background:#0b1117; color:var(--ink); cursor:pointer; }
.btn:hover{ border-color:var(--accent) }
.btn:disabled{ opacity:.5; cursor:default }
.msg{ min-height:1.4em; color:var(--muted) }
.msg.err{ color:var(--danger) } .msg.ok{ color:var(--ok) }
ul{ margin:8px 0 0 0; padding-left:20px }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Anagram dictionary</h1>
      <input id="word" type="text" placeholder="Enter a word" autocomplete="off" autofocus />
      <div class="controls">
        <button id="similar" class="btn">Find similar words</button>
        <button id="add" class="btn">Add word</button>
        <button id="stats" class="btn">Get stats</button>
      </div>
      <div id="msg" class="msg"></div>
      <div id="out"></div>
    </div>
  </div>
<script>
const $ = (s) => document.querySelector(s);
const word = $("#word"), msg = $("#msg"), out = $("#out"), addBtn = $("#add");
const valid = (w) => /^[a-zA-Z]+$/.test(w) || w === "";
function say(text, cls){ msg.className = "msg " + (cls || ""); msg.textContent = text; }
function esc(s){ return String(s).replace(/[&<>"]/g, (c)=>({"&":"&amp;","<":"&lt;",">":"&gt;",'"':"&quot;"}[c])); }
async function call(url, opts){
  const r = await fetch(url, opts);
  const isJson = (r.headers.get("content-type") || "").includes("json");
  const body = isJson ? await r.json() : await r.text();
  if(!r.ok) throw new Error(body && body.error ? `${body.type}: ${body.error}` : `HTTP ${r.status}`);
  return body;
}
word.addEventListener("input", ()=>{
  const ok = valid(word.value);
  word.classList.toggle("bad", !ok);
  addBtn.disabled = !ok;
  say(ok ? "" : "Input must contain only letters", ok ? "" : "err");
});
$("#similar").addEventListener("click", async ()=>{
  out.innerHTML = "";
  try{
    const data = await call(`/api/v1/similar?word=${encodeURIComponent(word.value)}`);
    say(`${data.similar.length} similar word(s)`);
    out.innerHTML = "<ul>" + data.similar.map((w)=>`<li>${esc(w)}</li>`).join("") + "</ul>";
  }catch(e){ say(e.message, "err"); }
});
addBtn.addEventListener("click", async ()=>{
  out.innerHTML = "";
  try{
    const text = await call("/api/v1/add-word", {method:"POST", headers:{"Content-Type":"application/json"}, body:JSON.stringify({word:word.value})});
    say(text, "ok"); word.value = "";
  }catch(e){ say(e.message, "err"); }
});
$("#stats").addEventListener("click", async ()=>{
  try{
    const s = await call("/api/v1/stats");
    say("Statistics");
    out.innerHTML = `<ul><li>Total words: ${s.totalWords}</li><li>Total requests: ${s.totalRequests}</li><li>Average processing time (&micro;s): ${s.avgProcessingTimeMs}</li></ul>`;
  }catch(e){ say(e.message, "err"); }
});
</script>
</body>
</html>
"""


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run the anagram HTTP API on top of Engine")
    mode = ap.add_mutually_exclusive_group()
    mode.add_argument("--build", action="store_true", help="(Re)load the dictionary from --words")
    mode.add_argument("--load", action="store_true", help="Open the existing store (default)")
    ap.add_argument("--db", dest="db", default=DEFAULT_DSN)  # DSN: "sqlite:///path" or "memory://"
    ap.add_argument("--words", default=DEFAULT_WORDS_PATH)
    ap.add_argument("--host", default=HOST)
    ap.add_argument("--port", type=int, default=PORT)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    engine = Engine()
    if args.build:
        if not args.words:
            ap.error("--build requires --words")
        engine.build(args.words, db_dsn=args.db, verbose=args.verbose)
    else:
        engine.load(db_dsn=args.db, words_path=args.words, verbose=args.verbose)

    try:
        create_app(engine).run(host=args.host, port=args.port, debug=args.verbose, use_reloader=False, threaded=True)
    finally:
        engine.shutdown()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
