from touch_orbit.config import load_config
from touch_orbit.app import ViewerApp

def main():
    cfg = load_config()
    app = ViewerApp(cfg)
    app.run()

if __name__ == "__main__":
    main()
