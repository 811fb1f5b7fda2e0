import jinja2

from edinit.ui import web_templates
from edinit.core.feature_manager import FeatureManager


class API:
    def __init__(self, feature_manager: FeatureManager, title: str = "edinit"):
        self.feature_manager = feature_manager
        self.host = feature_manager.host
        self.title = title

        self._shutdown_handled = False

    # TODO: shutdown is exposed to the page like every other method; move it off the js_api object
    def shutdown(self):
        if self._shutdown_handled:
            return
        self._shutdown_handled = True
        print("API Shutdown!")
        self.feature_manager.shutdown()

    def render_features(self):
        template = jinja2.Template(web_templates.FEATURES_TEMPLATE)
        skipped = [name for name, result in self.feature_manager.results.items() if not result.registered]
        return template.render(features=self.feature_manager.get_available_features(), skipped=skipped)

    def render_bindings(self):
        return self.host.keymap.render()

    def render_report(self):
        template = jinja2.Template(web_templates.REPORT_TEMPLATE)
        return template.render(
            title=self.title,
            features_html=self.render_features(),
            bindings_html=self.render_bindings(),
        )

    def press_key(self, key: str):
        return self.host.press(key)

    def browse_ticket(self, ticket: str = None):
        return self.host.call("browse-ticket", ticket)
