REPORT_TEMPLATE = """
<!doctype html>
<html>
<head>
    <meta charset="utf-8">
    <title>{{ title }}</title>
    <style>
        body { font-family: sans-serif; margin: 1.5em; }
        table { border-collapse: collapse; }
        td, th { padding: 2px 10px; text-align: left; }
        .skipped { color: #888; }
    </style>
</head>
<body>
    <h1>{{ title }}</h1>
    {{ features_html }}
    {{ bindings_html }}
</body>
</html>
"""

FEATURES_TEMPLATE = """
<h2>Features</h2>
<ul>
{% for name, feature in features.items() %}
    <li>
        <b>{{ name }}</b>
        {% if feature.package %}<small>({{ feature.package }} {{ feature.version }})</small>{% else %}<small>(built-in)</small>{% endif %}
        {% if feature.description %} &ndash; {{ feature.description }}{% endif %}
    </li>
{% endfor %}
{% for name in skipped %}
    <li class="skipped">{{ name }} (conditions not met)</li>
{% endfor %}
</ul>
"""
