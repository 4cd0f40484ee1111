"""Node.js Express router module."""

NODE_MODULE_TEMPLATE = """\
'use strict';

const express = require('express');

const router = express.Router();

/**
 * {title} routes.
 */
router.get('/', (req, res) => {{
  res.json({{ component: '{camel}', status: 'ok' }});
}});

module.exports = router;
"""
