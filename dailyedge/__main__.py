from .gui_main import launch_app

launch_app()
