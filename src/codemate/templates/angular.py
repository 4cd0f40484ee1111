"""Angular standalone component class."""

ANGULAR_COMPONENT_TEMPLATE = """\
import {{ Component, Input }} from '@angular/core';

/**
 * {title} component.
 */
@Component({{
  selector: 'app-{kebab}',
  standalone: true,
  template: `
    <div class="{kebab}">
      <ng-content></ng-content>
    </div>
  `,
}})
export class {pascal}Component {{
  @Input() title = '{title}';
}}
"""
