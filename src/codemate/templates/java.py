"""Java class with Javadoc."""

JAVA_CLASS_TEMPLATE = """\
/**
 * {title} component.
 */
public class {pascal} {{

    private final String name;

    /**
     * Creates a new {pascal} with its default name.
     */
    public {pascal}() {{
        this.name = "{title}";
    }}

    /**
     * Returns the display name of this component.
     *
     * @return the component name
     */
    public String getName() {{
        return name;
    }}
}}
"""
