#!/usr/bin/env python3
import aws_cdk as cdk

from cdn_oac.stacks import OriginAccessControlStack

app = cdk.App()
stack_suffix = app.node.try_get_context("stack_suffix") or ""
OriginAccessControlStack(app, f"CdnOacStack{stack_suffix}")

app.synth()
