"""
    Copyright 2018 EPAM Systems, Inc.

    Licensed under the Apache License, Version 2.0 (the "License");
    you may not use this file except in compliance with the License.
    You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

    Unless required by applicable law or agreed to in writing, software
    distributed under the License is distributed on an "AS IS" BASIS,
    WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
    See the License for the specific language governing permissions and
    limitations under the License.
"""
DEMO_ACTION = 'demo'
BUILD_ACTION = 'build'

MINIMAL_VARIANT = 'minimal'
FULL_VARIANT = 'full'
VARIANTS = (MINIMAL_VARIANT, FULL_VARIANT)

PART_LETTERS = ('a', 'b', 'c')

BASIC_PRODUCT_TITLE = 'Standard basic product:'
FULL_PRODUCT_TITLE = 'Standard full featured product:'
CUSTOM_PRODUCT_TITLE = 'Custom product:'

OK_RETURN_CODE = 0
FAILED_RETURN_CODE = 1
