# Copyright (c) 2025 Mahmood Khordoo
#
# This software is licensed under the MIT License.
# See the LICENSE file in the root directory for details.

"""
EKS Login Helper.

A Python CLI tool that streamlines access to Amazon EKS clusters. It drives
the AWS CLI and kubectl to log in through AWS SSO, pick a profile and a
cluster, and write the cluster into the local kubeconfig.
"""

__version__ = "1.0.0"
