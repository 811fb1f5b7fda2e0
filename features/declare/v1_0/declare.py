from jinja2 import Template

# Declarative-configuration helper, ensured by the bootstrap before any
# declaration runs. Provides the describe-* commands for inspecting the
# result of a startup pass.

_SETTINGS_TEMPLATE = Template("""
    <h2>Settings</h2>
    <table>
        <tbody>
        {% for name, value in settings.items() %}
            <tr><td>{{ name }}</td><td><code>{{ value }}</code></td></tr>
        {% endfor %}
        </tbody>
    </table>
""")

_HOOKS_TEMPLATE = Template("""
    <h2>Hooks</h2>
    {% if hooks %}
    <ul>
    {% for hook, functions in hooks.items() %}
        <li><code>{{ hook }}</code>: {{ functions|join(", ") }}</li>
    {% endfor %}
    </ul>
    {% else %}
    <p><i>No hooks.</i></p>
    {% endif %}
""")


def register():
    return {
        "commands": {
            "describe-bindings": describe_bindings,
            "describe-settings": describe_settings,
            "describe-hooks": describe_hooks,
        },
    }


def describe_bindings(host) -> str:
    return host.keymap.render()


def describe_settings(host) -> str:
    return _SETTINGS_TEMPLATE.render(settings=host.settings.as_dict())


def describe_hooks(host) -> str:
    return _HOOKS_TEMPLATE.render(hooks={hook: fns for hook, fns in sorted(host.hooks.items()) if fns})
