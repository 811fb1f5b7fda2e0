from edinit.core.bootstrap import PackageBootstrap
from edinit.core.feature_manager import FeatureManager
from edinit.core.host import EditorHost
from edinit.core.package_store import PackageStore
from edinit.core.settings import apply_settings, load_custom_file, settings_from_pairs
from edinit.helpers import install_helpers, load_links


def run_startup(constants, debug=False, host=None):
    """Apply an init script (a module or object of constants) once, top to bottom.

    Returns the host and the feature manager. Any failure propagates; whatever
    ran before it stays applied.
    """
    if host is None:
        store = PackageStore(constants.FEATURES_DIR, constants.PACKAGE_DIR, constants.ARCHIVES)
        host = EditorHost(store)

    # 1. Package bootstrap
    policy = PackageBootstrap(host, constants.BOOTSTRAP_PACKAGE).run()

    # 2. Settings, then whatever the editor saved on its own
    apply_settings(settings_from_pairs(constants.SETTINGS), host.settings)
    custom = load_custom_file(constants.CUSTOM_FILE)
    if custom:
        print(f"[Startup] Applying {len(custom)} setting(s) from {constants.CUSTOM_FILE}")
        apply_settings(custom, host.settings)

    # 3. Helper commands
    install_helpers(host, constants.TICKET_BASE_URL, load_links(constants.LINKS_FILE))

    # 4. Feature declarations
    manager = FeatureManager(host, constants.DEFAULTS, constants.APP_FEATURES, policy=policy, debug=debug)
    return host, manager
