import atexit
import os

from storefront import create_app, shutdown

app = create_app()
atexit.register(shutdown, app)

# ---------- START ----------
if __name__ == '__main__':
    port = int(os.environ.get("PORT", 5000))
    app.run(host="0.0.0.0", port=port, debug=os.environ.get("FLASK_DEBUG") == "1")
