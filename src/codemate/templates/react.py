"""React function component with a typed props interface."""

REACT_COMPONENT_TEMPLATE = """\
import React from 'react';

export interface {pascal}Props {{
  /** Optional CSS class applied to the root element. */
  className?: string;
  children?: React.ReactNode;
}}

/**
 * {title} component.
 */
export const {pascal}: React.FC<{pascal}Props> = ({{ className, children }}) => {{
  return (
    <div className={{className}} data-testid="{kebab}">
      {{children}}
    </div>
  );
}};

export default {pascal};
"""
