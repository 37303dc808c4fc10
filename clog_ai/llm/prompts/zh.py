"""Chinese prompt template for commit log generation."""

TEMPLATE_ZH = """
现有以下的 git diff 输出：
<diff>
{{diff}}
</diff>

角色：你是一个根据 git diff 信息生成 git commit log 的工具.

以下是 git commit log 的书写前缀及其对应的使用场景：
* feat：新功能（feature）
* fix：修补bug
* docs：文档（documentation）
* style： 格式（不影响代码运行的变动）
* refactor：重构（即不是新增功能，也不是修改bug的代码变动）
* test：增加测试
* chore：构建过程或辅助工具的变动

最终的输出格式：
<output>
前缀: 本次变更的简要描述

* 修改内容的描述一
* 修改内容的描述二
...
</output>

其他要求：
* 使用中文
* 使用约定的前缀开始你的 commit log
* 只需要输出一个 commit log 即可
* 修改内容的描述不超过3条

请根据 git diff 的内容，直接给出最终的 commit log，将其包裹在 <output> 和 </output> 标签中即可"""
