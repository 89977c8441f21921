import logging
from functools import wraps

from config import ConfigurationError, RokuConfiguration
from core.api_client import RokuClient, RokuError
from core.key_codes import RokuKey

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

NAV_KEYS = [
    RokuKey.HOME, RokuKey.BACK, RokuKey.UP, RokuKey.DOWN, RokuKey.LEFT,
    RokuKey.RIGHT, RokuKey.SELECT, RokuKey.PLAY, RokuKey.REV, RokuKey.FWD,
]


def report_failure(func):
    # Device errors are logged and the menu keeps running
    @wraps(func)
    def wrapper(self, *args, **kwargs):
        try:
            return func(self, *args, **kwargs)
        except RokuError as e:
            logger.error(f"Device call failed: {e}")
            return False
    return wrapper


class RokuMVP:
    def __init__(self, config: RokuConfiguration):
        self.config = config
        self.client = RokuClient.from_config(config)
        self.apps = ()

    @report_failure
    def show_device_info(self):
        info = self.client.get_device_info()
        print("\n" + "="*50)
        print("DEVICE INFO")
        print("="*50)
        print(f"Name: {info.user_device_name or info.friendly_device_name or 'Unknown'}")
        print(f"Model: {info.model_name} ({info.model_number})")
        print(f"Serial: {info.serial_number}")
        print(f"Software: {info.software_version} build {info.software_build}")
        print(f"Network: {info.network_type}")
        print(f"Power: {info.power_mode}")
        return True

    @report_failure
    def show_now_playing(self):
        active = self.client.get_active_app()
        player = self.client.get_player_status()
        print("\n" + "="*50)
        print("NOW PLAYING")
        print("="*50)
        print(f"App: {'Home' if active.is_home else active.name}")
        if active.screensaver:
            print(f"Screensaver: {active.screensaver.name}")
        print(f"State: {player.state}")
        if player.plugin_name:
            print(f"Source: {player.plugin_name}")
        if player.position_ms is not None:
            position = player.position_ms // 1000
            if player.duration_ms:
                print(f"Position: {position}s / {player.duration_ms // 1000}s")
            else:
                print(f"Position: {position}s")
        return True

    @report_failure
    def list_apps(self):
        self.apps = self.client.get_app_list()
        print("\n" + "="*50)
        print("INSTALLED APPS")
        print("="*50)

        if not self.apps:
            print("No apps found.")
            return True

        for i, app in enumerate(self.apps, 1):
            print(f"{i}. {app.name} (id {app.app_id}, v{app.version})")
        return True

    @report_failure
    def launch_app(self, app_index):
        # 1-based indexing for user interface
        if not 1 <= app_index <= len(self.apps):
            print(f"Invalid app index: {app_index}")
            return False

        app = self.apps[app_index - 1]
        self.client.launch_app(app.app_id)
        print(f"✓ Launched '{app.name}'")
        return True

    @report_failure
    def press_key(self, key):
        self.client.press_key(key)
        print(f"✓ Sent {key}")
        return True

    @report_failure
    def send_text(self, text):
        self.client.send_text(text)
        print(f"✓ Typed {len(text)} character(s)")
        return True

    def disconnect(self):
        self.client.close()
        logger.info("Closed device session")

    def interactive_menu(self):
        while True:
            print("\n" + "="*50)
            print(f"ROKU MVP - {self.config.host}:{self.config.port}")
            print("="*50)
            print("1. Device Info")
            print("2. Now Playing")
            print("3. List Apps")
            print("4. Launch App")
            print("5. Press Key")
            print("6. Type Text")
            print("0. Exit")

            try:
                choice = input("\nEnter your choice (0-6): ").strip()

                if choice == '0':
                    print("Goodbye!")
                    break
                elif choice == '1':
                    self.show_device_info()
                elif choice == '2':
                    self.show_now_playing()
                elif choice == '3':
                    self.list_apps()
                elif choice == '4':
                    if self.list_apps():
                        app_idx = int(input("Enter app number: "))
                        self.launch_app(app_idx)
                elif choice == '5':
                    for i, key in enumerate(NAV_KEYS, 1):
                        print(f"{i}. {key.value}")
                    key_idx = int(input("Enter key number: "))
                    if 1 <= key_idx <= len(NAV_KEYS):
                        self.press_key(NAV_KEYS[key_idx - 1])
                    else:
                        print(f"Invalid key index: {key_idx}")
                elif choice == '6':
                    self.send_text(input("Text to type: "))
                else:
                    print("Invalid choice. Please try again.")

            except ValueError:
                print("Invalid input. Please enter a number.")
            except KeyboardInterrupt:
                print("\n\nGoodbye!")
                break


def main():
    try:
        config = RokuConfiguration.from_env()
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return 1

    mvp = RokuMVP(config)
    try:
        if not mvp.show_device_info():
            print(f"Could not reach device at {config.host}:{config.port}.")
            return 1
        mvp.interactive_menu()
    except KeyboardInterrupt:
        print("\n\nShutting down...")
    finally:
        mvp.disconnect()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
